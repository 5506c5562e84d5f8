"""
Customer data access functions.
Handles customer CRUD operations and the order-derived figures shown on the
customer pages (order count, total spent).
"""

from database import get_db
from utils.messages import get_message
from utils.validators import (
    validate_email, sanitize_input, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
)


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_all_customers() -> list:
    """
    Get all customers.

    Returns:
        List of customer dicts (with order_count), ordered by name
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute('''
        SELECT c.*,
               (SELECT COUNT(*) FROM orders WHERE customer_id = c.id) as order_count
        FROM customers c
        ORDER BY c.name COLLATE NOCASE, c.id
    ''')
    rows = cursor.fetchall()
    return [dict(row) for row in rows]


def get_customer_by_id(customer_id: int) -> dict:
    """
    Get customer by ID.

    Args:
        customer_id: Customer ID

    Returns:
        Customer dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM customers WHERE id = ?', (customer_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def get_customer_order_count(customer_id: int) -> int:
    """
    Count the orders owned by a customer.

    Args:
        customer_id: Customer ID

    Returns:
        Number of orders (0 for unknown customers)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT COUNT(*) FROM orders WHERE customer_id = ?', (customer_id,))
    return cursor.fetchone()[0]


def get_customer_total_spent(customer_id: int) -> float:
    """
    Sum of unit_price * quantity over every item of every order of the customer.

    Args:
        customer_id: Customer ID

    Returns:
        Total amount (0.0 when nothing is priced)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT COALESCE(SUM(oi.unit_price * oi.quantity), 0)
        FROM orders o
        JOIN order_items oi ON oi.order_id = o.id
        WHERE o.customer_id = ?
    ''', (customer_id,))
    return float(cursor.fetchone()[0])


def get_customer_with_details(customer_id: int) -> dict:
    """
    Get customer with orders and derived totals for the details page.

    Args:
        customer_id: Customer ID

    Returns:
        Customer dict with 'orders', 'order_count', 'total_spent' and
        'can_delete', or None if not found
    """
    from models.order import get_orders_for_customer

    customer = get_customer_by_id(customer_id)
    if not customer:
        return None

    orders = get_orders_for_customer(customer_id)
    customer['orders'] = orders
    customer['order_count'] = len(orders)
    customer['total_spent'] = sum(order['total'] for order in orders)
    customer['can_delete'] = customer['order_count'] == 0
    return customer


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================

def _clean_fields(name: str = None, email: str = None, partial: bool = False) -> dict:
    """
    Normalize and validate customer fields.

    Args:
        name: Customer name
        email: Customer email
        partial: If True, fields left as None are skipped (updates)

    Returns:
        Dict of cleaned fields

    Raises:
        ValueError if a field is blank, too long or malformed
    """
    fields = {}

    if name is not None or not partial:
        name = sanitize_input(name)
        if not name:
            raise ValueError(get_message('name_required'))
        if len(name) > NAME_MAX_LENGTH:
            raise ValueError(get_message('name_too_long', max=NAME_MAX_LENGTH))
        fields['name'] = name

    if email is not None or not partial:
        email = sanitize_input(email)
        if not email:
            raise ValueError(get_message('email_required'))
        if len(email) > EMAIL_MAX_LENGTH:
            raise ValueError(get_message('email_too_long', max=EMAIL_MAX_LENGTH))
        if not validate_email(email):
            raise ValueError(get_message('invalid_email'))
        fields['email'] = email

    return fields


def create_customer(name: str, email: str) -> int:
    """
    Create new customer.

    Args:
        name: Customer name (required)
        email: Customer email (required)

    Returns:
        New customer ID

    Raises:
        ValueError if name or email is missing or invalid
    """
    fields = _clean_fields(name=name, email=email)

    db = get_db()
    cursor = db.cursor()

    cursor.execute('''
        INSERT INTO customers (name, email)
        VALUES (?, ?)
    ''', (fields['name'], fields['email']))

    db.commit()
    return cursor.lastrowid


def update_customer(customer_id: int, **kwargs) -> bool:
    """
    Update customer fields.

    Args:
        customer_id: Customer ID to update
        **kwargs: Fields to update (name, email)

    Returns:
        True if updated successfully

    Raises:
        ValueError if a given field is blank or invalid
    """
    allowed_fields = ['name', 'email']
    fields = _clean_fields(
        name=kwargs.get('name'),
        email=kwargs.get('email'),
        partial=True
    )

    updates = []
    values = []

    for field in allowed_fields:
        if field in fields:
            updates.append(f'{field} = ?')
            values.append(fields[field])

    if not updates:
        return False

    updates.append('updated_at = CURRENT_TIMESTAMP')
    values.append(customer_id)
    query = f'UPDATE customers SET {", ".join(updates)} WHERE id = ?'

    db = get_db()
    cursor = db.cursor()
    cursor.execute(query, values)
    db.commit()

    return cursor.rowcount > 0


def delete_customer(customer_id: int) -> bool:
    """
    Delete customer.

    The "no orders" rule is enforced by the caller; with orders left the
    foreign key on orders.customer_id makes this raise IntegrityError.

    Args:
        customer_id: Customer ID to delete

    Returns:
        True if deleted successfully
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('DELETE FROM customers WHERE id = ?', (customer_id,))
    db.commit()

    return cursor.rowcount > 0
