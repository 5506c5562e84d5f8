"""
Tests for the JSON API.
"""

from models.customer import create_customer
from models.order import create_order


class TestHealth:

    def test_health_check(self, client):
        """Health endpoint reports OK with app name and version."""
        response = client.get('/api/health')
        assert response.status_code == 200

        data = response.get_json()
        assert data['status'] == 'ok'
        assert data['app'] == 'CoffeeShop'
        assert data['version'] == '1.0.0'


class TestCustomersApi:
    """GET /api/customers and /api/customers/<id>"""

    def test_list_customers(self, client, john_and_james):
        response = client.get('/api/customers')
        assert response.status_code == 200

        payload = response.get_json()
        assert payload['success'] is True
        assert payload['count'] == 2
        assert [c['name'] for c in payload['data']] == ['James', 'John']
        assert all('email' not in c for c in payload['data'])

    def test_customer_detail(self, app, client):
        customer_id = create_customer(name='John', email='john@john.john')
        create_order(customer_id, date_created='2000-01-01 00:00:00',
                     items=[('Latte', 4.50, 2)])

        payload = client.get(f'/api/customers/{customer_id}').get_json()
        assert payload['success'] is True

        data = payload['data']
        assert data['email'] == 'john@john.john'
        assert data['order_count'] == 1
        assert data['total_spent'] == 9.0
        assert data['can_delete'] is False
        assert data['orders'][0]['date_created'] == '2000-01-01 00:00:00'
        assert data['orders'][0]['items'] == [
            {'description': 'Latte', 'unit_price': 4.5, 'quantity': 2}
        ]

    def test_customer_not_found(self, client):
        response = client.get('/api/customers/999')
        assert response.status_code == 404

        payload = response.get_json()
        assert payload == {'success': False, 'error': 'Customer not found'}
