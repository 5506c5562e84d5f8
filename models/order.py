"""
Order data access functions.
Orders only exist as sub-objects of a customer; each order is made of priced
items whose sum is the order total.
"""

from database import get_db
from utils.datetime_helpers import to_timestamp
from utils.messages import get_message
from utils.validators import validate_price, validate_quantity, sanitize_input


def _normalize_item(item) -> tuple:
    """
    Turn an item given as tuple or dict into (description, unit_price, quantity).

    Raises:
        ValueError if the item is malformed
    """
    if isinstance(item, dict):
        description = item.get('description')
        unit_price = item.get('unit_price', 0)
        quantity = item.get('quantity', 1)
    else:
        try:
            description, unit_price, *rest = item
        except (TypeError, ValueError):
            raise ValueError(get_message('invalid_item'))
        quantity = rest[0] if rest else 1

    if not isinstance(description, str):
        raise ValueError(get_message('description_required'))

    description = sanitize_input(description)
    if not description:
        raise ValueError(get_message('description_required'))
    if not validate_price(unit_price):
        raise ValueError(get_message('invalid_price'))
    if not validate_quantity(quantity):
        raise ValueError(get_message('invalid_quantity'))

    return description, float(unit_price), int(quantity)


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_order_items(order_id: int) -> list:
    """
    Get the items of an order.

    Args:
        order_id: Order ID

    Returns:
        List of item dicts (with line_total)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT oi.*, oi.unit_price * oi.quantity as line_total
        FROM order_items oi
        WHERE oi.order_id = ?
        ORDER BY oi.id
    ''', (order_id,))
    return [dict(row) for row in cursor.fetchall()]


def get_order_total(order_id: int) -> float:
    """Sum of unit_price * quantity for an order (0.0 without items)."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT COALESCE(SUM(unit_price * quantity), 0)
        FROM order_items
        WHERE order_id = ?
    ''', (order_id,))
    return float(cursor.fetchone()[0])


def get_order_by_id(order_id: int) -> dict:
    """
    Get order by ID, with its items and total.

    Args:
        order_id: Order ID

    Returns:
        Order dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM orders WHERE id = ?', (order_id,))
    row = cursor.fetchone()
    if not row:
        return None

    order = dict(row)
    order['items'] = get_order_items(order_id)
    order['total'] = sum(item['line_total'] for item in order['items'])
    return order


def get_orders_for_customer(customer_id: int) -> list:
    """
    Get a customer's orders, oldest first.

    Args:
        customer_id: Customer ID

    Returns:
        List of order dicts, each with 'items' and 'total'
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT * FROM orders
        WHERE customer_id = ?
        ORDER BY date_created, id
    ''', (customer_id,))
    orders = [dict(row) for row in cursor.fetchall()]

    for order in orders:
        order['items'] = get_order_items(order['id'])
        order['total'] = sum(item['line_total'] for item in order['items'])

    return orders


# =============================================================================
# CREATE
# =============================================================================

def create_order(customer_id: int, date_created=None, items=None) -> int:
    """
    Create an order owned by a customer.

    Args:
        customer_id: Owning customer ID
        date_created: datetime or timestamp string (defaults to now)
        items: Iterable of (description, unit_price, quantity) tuples or dicts

    Returns:
        New order ID

    Raises:
        ValueError if the customer does not exist or an item is invalid
    """
    from models.customer import get_customer_by_id

    if not get_customer_by_id(customer_id):
        raise ValueError(get_message('customer_not_found'))

    # Validate everything before writing anything
    clean_items = [_normalize_item(item) for item in (items or [])]

    db = get_db()
    cursor = db.cursor()

    try:
        cursor.execute('''
            INSERT INTO orders (customer_id, date_created)
            VALUES (?, ?)
        ''', (customer_id, to_timestamp(date_created)))
        order_id = cursor.lastrowid

        for description, unit_price, quantity in clean_items:
            cursor.execute('''
                INSERT INTO order_items (order_id, description, unit_price, quantity)
                VALUES (?, ?, ?, ?)
            ''', (order_id, description, unit_price, quantity))

        db.commit()
    except Exception:
        db.rollback()
        raise

    return order_id


def add_order_item(order_id: int, description: str, unit_price: float, quantity: int = 1) -> int:
    """
    Add a priced item to an existing order.

    Args:
        order_id: Order ID
        description: Item description
        unit_price: Price per unit (>= 0)
        quantity: Units (>= 1)

    Returns:
        New item ID

    Raises:
        ValueError if the order does not exist or the item is invalid
    """
    description, unit_price, quantity = _normalize_item((description, unit_price, quantity))

    if not get_order_by_id(order_id):
        raise ValueError(get_message('order_not_found'))

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO order_items (order_id, description, unit_price, quantity)
        VALUES (?, ?, ?, ?)
    ''', (order_id, description, unit_price, quantity))
    db.commit()

    return cursor.lastrowid
