"""
API routes for JSON endpoints.
Read-only access to customer data.
"""

from flask import jsonify, current_app, Blueprint

from models.customer import get_all_customers, get_customer_with_details
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint.

    Returns:
        JSON with status and version
    """
    return jsonify({
        'status': 'ok',
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
        'app': current_app.config.get('APP_NAME', 'CoffeeShop')
    })


@api_bp.route('/customers')
def api_customers():
    """
    Get all customers as JSON.

    Emails are left out, as in the HTML list.

    Returns:
        JSON list of {id, name, order_count}
    """
    customers = [
        {
            'id': c['id'],
            'name': c['name'],
            'order_count': c['order_count']
        }
        for c in get_all_customers()
    ]

    return api_success(data=customers, count=len(customers))


@api_bp.route('/customers/<int:customer_id>')
def api_customer(customer_id):
    """
    Get one customer with orders and totals.

    Returns:
        JSON customer, or 404 error envelope
    """
    customer = get_customer_with_details(customer_id)
    if customer is None:
        return api_error(MESSAGES['customer_not_found'], status=404)

    return api_success(data={
        'id': customer['id'],
        'name': customer['name'],
        'email': customer['email'],
        'order_count': customer['order_count'],
        'total_spent': round(customer['total_spent'], 2),
        'can_delete': customer['can_delete'],
        'orders': [
            {
                'id': order['id'],
                'date_created': order['date_created'],
                'total': round(order['total'], 2),
                'items': [
                    {
                        'description': item['description'],
                        'unit_price': item['unit_price'],
                        'quantity': item['quantity']
                    }
                    for item in order['items']
                ]
            }
            for order in customer['orders']
        ]
    })
