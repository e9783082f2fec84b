"""
Restaurant reservation data access.
Handles reservation lookup, per-customer listing, and persistence.
"""

from flask import current_app

from database import get_db
from .errors import NotFoundError


RESERVATION_COLUMNS = 'id, customer_id, start_at, num_guests, notes'


class Reservation:
    """
    A reservation for a party at the restaurant.
    customer_id is fixed once the reservation has been inserted.
    """

    def __init__(self, customer_id, start_at, num_guests, notes=None, id=None):
        self.id = id
        self.customer_id = customer_id
        self.start_at = start_at
        self.num_guests = num_guests
        self.notes = notes

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row['id'],
            customer_id=row['customer_id'],
            start_at=row['start_at'],
            num_guests=row['num_guests'],
            notes=row['notes'],
        )

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, value):
        # Falsy notes are stored as the empty string
        self._notes = value if value else ''

    @property
    def formatted_start_at(self) -> str:
        """Start time formatted for display."""
        fmt = current_app.config.get('DATETIME_DISPLAY_FORMAT', '%B %d %Y, %I:%M %p')
        return self.start_at.strftime(fmt)

    def get_customer(self):
        """Get the customer this reservation belongs to."""
        from .customer import get_customer_by_id

        return get_customer_by_id(self.customer_id)

    def save(self):
        """
        Insert this reservation, or update it if it already has an id.
        Updates rewrite start time, guest count and notes only.
        """
        db = get_db()
        cursor = db.cursor()

        if self.id is None:
            cursor.execute('''
                INSERT INTO reservations (customer_id, start_at, num_guests, notes)
                VALUES (?, ?, ?, ?)
            ''', (self.customer_id, self.start_at, self.num_guests, self.notes))
            self.id = cursor.lastrowid
        else:
            cursor.execute('''
                UPDATE reservations
                SET start_at = ?, num_guests = ?, notes = ?
                WHERE id = ?
            ''', (self.start_at, self.num_guests, self.notes, self.id))

        db.commit()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'customer_id': self.customer_id,
            'start_at': self.start_at.isoformat(),
            'num_guests': self.num_guests,
            'notes': self.notes,
        }

    def __repr__(self):
        return f'<Reservation id={self.id} customer_id={self.customer_id} start_at={self.start_at}>'


def get_reservation_by_id(reservation_id: int) -> Reservation:
    """
    Get reservation by ID.

    Args:
        reservation_id: Reservation ID

    Returns:
        Reservation

    Raises:
        NotFoundError: If no reservation has this id
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT {RESERVATION_COLUMNS} FROM reservations WHERE id = ?', (reservation_id,))
    row = cursor.fetchone()
    if row is None:
        raise NotFoundError(f'No such reservation: {reservation_id}')
    return Reservation.from_row(row)


def get_reservations_for_customer(customer_id: int) -> list:
    """
    Get all reservations for a customer ordered by start time.

    Args:
        customer_id: Customer ID

    Returns:
        List of Reservation, earliest first
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT {RESERVATION_COLUMNS}
        FROM reservations
        WHERE customer_id = ?
        ORDER BY start_at, id
    ''', (customer_id,))
    return [Reservation.from_row(row) for row in cursor.fetchall()]
