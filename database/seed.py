"""
Database seed data.
Sample customers and reservations for a fresh development database.
"""

from datetime import datetime


def seed_database(db):
    """Insert sample seed data."""

    # 1. Customers
    customers_data = [
        ('Anna', None, 'Anderson', '555-0101', 'Prefers the window table'),
        ('Bob', 'J', 'Lee', '555-0102', ''),
        ('Carla', None, 'Nguyen', '555-0103', 'Allergic to peanuts'),
        ('Daniel', 'R', 'Okafor', '555-0104', ''),
        ('Zoe', None, 'Adams', '555-0105', 'Regular on Fridays'),
    ]

    customer_ids = []
    for first_name, middle_name, last_name, phone, notes in customers_data:
        cursor = db.execute('''
            INSERT INTO customers (first_name, middle_name, last_name, phone, notes)
            VALUES (?, ?, ?, ?, ?)
        ''', (first_name, middle_name, last_name, phone, notes))
        customer_ids.append(cursor.lastrowid)

    # 2. Reservations (customer index, start, guests, notes)
    reservations_data = [
        (0, datetime(2024, 3, 1, 19, 30), 2, 'Anniversary'),
        (0, datetime(2024, 3, 15, 12, 0), 4, ''),
        (0, datetime(2024, 4, 2, 20, 0), 2, ''),
        (1, datetime(2024, 3, 8, 18, 45), 6, 'Birthday cake at 20:00'),
        (2, datetime(2024, 3, 22, 13, 15), 3, ''),
        (4, datetime(2024, 3, 1, 19, 0), 2, ''),
        (4, datetime(2024, 3, 29, 19, 0), 2, 'Usual table'),
    ]

    for customer_index, start_at, num_guests, notes in reservations_data:
        db.execute('''
            INSERT INTO reservations (customer_id, start_at, num_guests, notes)
            VALUES (?, ?, ?, ?)
        ''', (customer_ids[customer_index], start_at, num_guests, notes))
