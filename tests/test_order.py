"""
Tests for the order store.
"""

from datetime import datetime, timezone, timedelta

import pytest
from models.customer import create_customer
from models.order import (
    create_order, add_order_item, get_order_by_id, get_orders_for_customer,
    get_order_total, get_order_items
)


@pytest.fixture
def customer_id(app):
    """A customer to own the orders."""
    return create_customer(name='John', email='john@john.john')


class TestCreateOrder:
    """Test order creation."""

    def test_create_order_defaults_to_now(self, app, customer_id):
        order_id = create_order(customer_id)

        order = get_order_by_id(order_id)
        assert order['customer_id'] == customer_id
        created = datetime.strptime(order['date_created'], '%Y-%m-%d %H:%M:%S')
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        assert abs(now - created) < timedelta(minutes=1)
        assert order['items'] == []
        assert order['total'] == 0

    def test_create_order_with_date(self, app, customer_id):
        order_id = create_order(customer_id, date_created=datetime(2000, 1, 1))
        assert get_order_by_id(order_id)['date_created'] == '2000-01-01 00:00:00'

    def test_aware_date_is_stored_as_utc(self, app, customer_id):
        local = datetime(2000, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        order_id = create_order(customer_id, date_created=local)
        assert get_order_by_id(order_id)['date_created'] == '2000-01-01 00:00:00'

    def test_create_order_with_items(self, app, customer_id):
        order_id = create_order(customer_id, items=[
            ('Latte', 4.50, 2),
            {'description': 'Croissant', 'unit_price': 3.25},
        ])

        items = get_order_items(order_id)
        assert [(i['description'], i['unit_price'], i['quantity']) for i in items] == [
            ('Latte', 4.50, 2),
            ('Croissant', 3.25, 1),
        ]
        assert get_order_total(order_id) == pytest.approx(12.25)

    def test_unknown_customer(self, app):
        with pytest.raises(ValueError) as exc_info:
            create_order(999)
        assert 'Customer not found' in str(exc_info.value)

    @pytest.mark.parametrize('item, message', [
        (('', 1.0, 1), 'Item description is required'),
        (('Latte', -1, 1), 'Price must be a non-negative number'),
        (('Latte', 'free', 1), 'Price must be a non-negative number'),
        (('Latte', 1.0, 0), 'Quantity must be a whole number of at least 1'),
        (('Latte', 1.0, 1.5), 'Quantity must be a whole number of at least 1'),
        (('Latte', float('inf'), 1), 'Price must be a non-negative number'),
        (('Latte', 'inf', 1), 'Price must be a non-negative number'),
        ((123, 1.0, 1), 'Item description is required'),
        ({'description': 42, 'unit_price': 1.0}, 'Item description is required'),
        (('Latte',), 'Order items need a description and a price'),
        (7, 'Order items need a description and a price'),
    ])
    def test_invalid_item_writes_nothing(self, app, customer_id, item, message):
        """A bad item rejects the whole order."""
        with pytest.raises(ValueError) as exc_info:
            create_order(customer_id, items=[('Tea', 1.0, 1), item])
        assert message in str(exc_info.value)
        assert get_orders_for_customer(customer_id) == []


class TestOrderQueries:
    """Test order reads."""

    def test_orders_are_scoped_to_customer(self, app, customer_id):
        other_id = create_customer(name='James', email='james@james.james')
        create_order(customer_id, items=[('Latte', 4.50, 1)])
        create_order(other_id, items=[('Tea', 1.75, 1)])

        orders = get_orders_for_customer(customer_id)
        assert len(orders) == 1
        assert orders[0]['items'][0]['description'] == 'Latte'
        assert orders[0]['total'] == pytest.approx(4.50)

    def test_orders_oldest_first(self, app, customer_id):
        late = create_order(customer_id, date_created='2001-01-01 00:00:00')
        early = create_order(customer_id, date_created='2000-01-01 00:00:00')

        assert [o['id'] for o in get_orders_for_customer(customer_id)] == [early, late]

    def test_add_order_item(self, app, customer_id):
        order_id = create_order(customer_id)

        add_order_item(order_id, 'Muffin', 2.50, quantity=2)

        assert get_order_total(order_id) == pytest.approx(5.0)
        assert get_order_by_id(order_id)['total'] == pytest.approx(5.0)

    def test_add_invalid_order_item(self, app, customer_id):
        order_id = create_order(customer_id)

        with pytest.raises(ValueError):
            add_order_item(order_id, 'Muffin', -2)
        assert get_order_items(order_id) == []

    def test_add_item_to_unknown_order(self, app):
        """A missing order is a ValueError, not a database error."""
        with pytest.raises(ValueError) as exc_info:
            add_order_item(999, 'Latte', 1.0)
        assert 'Order not found' in str(exc_info.value)

    def test_connection_usable_after_rejected_item(self, app, customer_id):
        """Nothing is left pending after a rejected item."""
        with pytest.raises(ValueError):
            add_order_item(999, 'Latte', 1.0)

        order_id = create_order(customer_id, items=[('Tea', 1.75, 1)])
        assert get_order_total(order_id) == pytest.approx(1.75)

    def test_get_order_by_id_not_found(self, app):
        assert get_order_by_id(999) is None
        assert get_order_total(999) == 0.0
