"""
Pytest configuration and fixtures.
Each test gets its own SQLite database file with a fresh schema.
"""

import os
import pytest


@pytest.fixture
def app(tmp_path):
    """Create test application with an isolated, empty database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['DATABASE_PATH'] = os.path.join(str(tmp_path), 'lunchly_test.db')

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def make_customer(app):
    """Factory that saves a customer and returns it."""
    from models.customer import Customer

    def _make(first_name, last_name, **kwargs):
        customer = Customer(first_name=first_name, last_name=last_name, **kwargs)
        customer.save()
        return customer

    return _make


@pytest.fixture
def make_reservation(app):
    """Factory that saves a reservation and returns it."""
    from models.reservation import Reservation

    def _make(customer, start_at, num_guests=2, notes=None):
        reservation = Reservation(
            customer_id=customer.id,
            start_at=start_at,
            num_guests=num_guests,
            notes=notes
        )
        reservation.save()
        return reservation

    return _make
