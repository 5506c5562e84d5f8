"""
Customer routes: list, create, details, edit, delete.
Server-rendered pages over the customer store.
"""

from flask import render_template, redirect, url_for, flash, abort, current_app, Blueprint

from blueprints.customers.forms import CustomerForm
from models.customer import (
    get_all_customers, get_customer_by_id, get_customer_with_details,
    get_customer_order_count, create_customer, update_customer, delete_customer
)
from utils.messages import MESSAGES

customers_bp = Blueprint('customers', __name__)


def _get_customer_or_404(customer_id):
    """Load a customer or abort with 404."""
    customer = get_customer_by_id(customer_id)
    if customer is None:
        abort(404, description=MESSAGES['customer_not_found'])
    return customer


@customers_bp.route('/customers')
def index():
    """List all customers (names only)."""
    customers = get_all_customers()
    return render_template('customers/index.html', customers=customers)


@customers_bp.route('/customers/new')
def new():
    """Display the empty create form."""
    form = CustomerForm()
    return render_template('customers/new.html', form=form)


@customers_bp.route('/customers/create', methods=['POST'])
def create():
    """
    Create a customer from the submitted form.

    Valid: redirect to the new customer's details page.
    Invalid: re-render the form with errors (400).
    """
    form = CustomerForm()

    if not form.validate_on_submit():
        flash(MESSAGES['form_invalid'], 'error')
        return render_template('customers/new.html', form=form), 400

    try:
        customer_id = create_customer(name=form.name.data, email=form.email.data)
    except ValueError as e:
        flash(str(e), 'error')
        return render_template('customers/new.html', form=form), 400

    current_app.logger.info('Customer %s created', customer_id)
    flash(MESSAGES['customer_created'], 'success')
    return redirect(url_for('customers.show', customer_id=customer_id))


@customers_bp.route('/customers/details/<int:customer_id>')
def show(customer_id):
    """Display one customer with orders, total spent and (maybe) the delete control."""
    customer = get_customer_with_details(customer_id)
    if customer is None:
        abort(404, description=MESSAGES['customer_not_found'])

    return render_template('customers/show.html', customer=customer)


@customers_bp.route('/customers/edit/<int:customer_id>')
def edit(customer_id):
    """Display the edit form pre-populated with the customer's data."""
    customer = _get_customer_or_404(customer_id)
    form = CustomerForm(data=customer)
    return render_template('customers/edit.html', customer=customer, form=form)


@customers_bp.route('/customers/edit/<int:customer_id>', methods=['POST'])
def update(customer_id):
    """
    Update a customer from the submitted form.

    Valid: redirect to the details page.
    Invalid: re-render the edit form with errors (400).
    """
    customer = _get_customer_or_404(customer_id)
    form = CustomerForm()

    if not form.validate_on_submit():
        flash(MESSAGES['form_invalid'], 'error')
        return render_template('customers/edit.html', customer=customer, form=form), 400

    try:
        updated = update_customer(customer_id, name=form.name.data, email=form.email.data)
    except ValueError as e:
        flash(str(e), 'error')
        return render_template('customers/edit.html', customer=customer, form=form), 400

    if updated:
        current_app.logger.info('Customer %s updated', customer_id)
        flash(MESSAGES['customer_updated'], 'success')

    return redirect(url_for('customers.show', customer_id=customer_id))


@customers_bp.route('/customers/delete/<int:customer_id>', methods=['POST'])
def delete(customer_id):
    """
    Delete a customer that owns no orders, then show the list.

    Customers with orders are refused with 409 even when the request
    bypasses the details page.
    """
    _get_customer_or_404(customer_id)

    order_count = get_customer_order_count(customer_id)
    if order_count > 0:
        current_app.logger.warning(
            'Refused to delete customer %s: %s order(s) remain', customer_id, order_count
        )
        abort(409, description=MESSAGES['customer_has_orders'])

    delete_customer(customer_id)
    current_app.logger.info('Customer %s deleted', customer_id)
    flash(MESSAGES['customer_deleted'], 'success')
    return redirect(url_for('customers.index'))
