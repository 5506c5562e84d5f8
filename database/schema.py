"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    # Disable foreign key constraints before dropping
    db.execute('PRAGMA foreign_keys = OFF')

    tables = [
        'order_items',
        'orders',
        'customers',
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    # Re-enable foreign key constraints
    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    # 1. Customers
    db.execute('''
        CREATE TABLE customers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # 2. Orders (always owned by one customer)
    db.execute('''
        CREATE TABLE orders (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            customer_id INTEGER NOT NULL REFERENCES customers(id),
            date_created TEXT NOT NULL
        )
    ''')

    # 3. Order items (priced lines of an order)
    db.execute('''
        CREATE TABLE order_items (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            order_id INTEGER NOT NULL REFERENCES orders(id) ON DELETE CASCADE,
            description TEXT NOT NULL,
            unit_price REAL NOT NULL DEFAULT 0 CHECK(unit_price >= 0),
            quantity INTEGER NOT NULL DEFAULT 1 CHECK(quantity >= 1)
        )
    ''')


def create_indexes(db):
    """Create indexes for the lookups the pages run."""
    db.execute('CREATE INDEX IF NOT EXISTS idx_customers_name ON customers(name)')
    db.execute('CREATE INDEX IF NOT EXISTS idx_orders_customer ON orders(customer_id)')
    db.execute('CREATE INDEX IF NOT EXISTS idx_order_items_order ON order_items(order_id)')
