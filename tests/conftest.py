"""
Pytest configuration and fixtures.
Every test gets its own SQLite file, so tests never share data.
"""

import os
import pytest

os.environ['FLASK_ENV'] = 'test'


@pytest.fixture
def app(tmp_path):
    """Create test application with an isolated, empty database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['DATABASE_PATH'] = str(tmp_path / 'coffeeshop_test.db')

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def john_and_james(app):
    """Create the two customers most page tests start from."""
    from models.customer import create_customer

    with app.app_context():
        john_id = create_customer(name='John', email='john@john.john')
        james_id = create_customer(name='James', email='james@james.james')
    return john_id, james_id
