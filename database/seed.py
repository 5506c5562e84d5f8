"""
Database seed data.
Demo customers and orders for a fresh development database.
"""

DEMO_CUSTOMERS = [
    ('John', 'john@john.john'),
    ('James', 'james@james.james'),
    ('Ada', 'ada@example.com'),
]

# (customer name, date_created, [(description, unit_price, quantity), ...])
DEMO_ORDERS = [
    ('John', '2000-01-01 00:00:00', [('Latte', 4.50, 2), ('Croissant', 3.25, 1)]),
    ('Ada', '2024-03-14 09:30:00', [('Espresso', 2.75, 1)]),
]


def seed_database(db):
    """Insert demo customers and their orders."""

    # 1. Customers
    customer_ids = {}
    for name, email in DEMO_CUSTOMERS:
        cursor = db.execute('''
            INSERT INTO customers (name, email)
            VALUES (?, ?)
        ''', (name, email))
        customer_ids[name] = cursor.lastrowid

    # 2. Orders with their items
    for customer_name, date_created, items in DEMO_ORDERS:
        cursor = db.execute('''
            INSERT INTO orders (customer_id, date_created)
            VALUES (?, ?)
        ''', (customer_ids[customer_name], date_created))
        order_id = cursor.lastrowid

        for description, unit_price, quantity in items:
            db.execute('''
                INSERT INTO order_items (order_id, description, unit_price, quantity)
                VALUES (?, ?, ?, ?)
            ''', (order_id, description, unit_price, quantity))

    return customer_ids
