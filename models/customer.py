"""
Restaurant customer data access.
Handles customer lookup, name search, top customers, and persistence.
"""

from database import get_db
from database.connection import normalize_text
from .errors import NotFoundError


CUSTOMER_COLUMNS = 'id, first_name, middle_name, last_name, phone, notes'


class Customer:
    """
    Customer of the restaurant.
    Wraps a customers row; id is None until the first save().
    """

    def __init__(self, first_name, last_name, phone=None, notes=None,
                 middle_name=None, id=None):
        self.id = id
        self.first_name = first_name
        self.middle_name = middle_name
        self.last_name = last_name
        self.phone = phone
        self.notes = notes

    @classmethod
    def from_row(cls, row):
        """
        Build a Customer from a database row.

        Args:
            row: sqlite3.Row or dict with customers columns

        Returns:
            Customer instance
        """
        return cls(
            id=row['id'],
            first_name=row['first_name'],
            middle_name=row['middle_name'],
            last_name=row['last_name'],
            phone=row['phone'],
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
    def full_name(self) -> str:
        """First, middle and last name joined by single spaces."""
        middle_name = self.middle_name or ''
        return f'{self.first_name} {middle_name} {self.last_name}'

    def get_reservations(self) -> list:
        """Get all reservations for this customer, earliest first."""
        from .reservation import get_reservations_for_customer

        return get_reservations_for_customer(self.id)

    def save(self):
        """
        Insert this customer, or update every field if it already has an id.
        The generated id is assigned on insert.
        """
        db = get_db()
        cursor = db.cursor()

        if self.id is None:
            cursor.execute('''
                INSERT INTO customers (first_name, middle_name, last_name, phone, notes)
                VALUES (?, ?, ?, ?, ?)
            ''', (self.first_name, self.middle_name, self.last_name, self.phone, self.notes))
            self.id = cursor.lastrowid
        else:
            cursor.execute('''
                UPDATE customers
                SET first_name = ?, middle_name = ?, last_name = ?, phone = ?, notes = ?
                WHERE id = ?
            ''', (self.first_name, self.middle_name, self.last_name, self.phone, self.notes,
                  self.id))

        db.commit()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'first_name': self.first_name,
            'middle_name': self.middle_name,
            'last_name': self.last_name,
            'phone': self.phone,
            'notes': self.notes,
            'full_name': self.full_name,
        }

    def __repr__(self):
        return f'<Customer id={self.id} name={self.full_name!r}>'


# =============================================================================
# READ OPERATIONS
# =============================================================================

def get_all_customers() -> list:
    """
    Get all customers ordered by last name, then first name.

    Returns:
        List of Customer
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT {CUSTOMER_COLUMNS}
        FROM customers
        ORDER BY last_name, first_name
    ''')
    return [Customer.from_row(row) for row in cursor.fetchall()]


def get_customer_by_id(customer_id: int) -> Customer:
    """
    Get customer by ID.

    Args:
        customer_id: Customer ID

    Returns:
        Customer

    Raises:
        NotFoundError: If no customer has this id
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'SELECT {CUSTOMER_COLUMNS} FROM customers WHERE id = ?', (customer_id,))
    row = cursor.fetchone()
    if row is None:
        raise NotFoundError(f'No such customer: {customer_id}')
    return Customer.from_row(row)


def _like_pattern(fragment: str) -> str:
    """Wrap a literal fragment for a LIKE ... ESCAPE '\\' substring match."""
    escaped = fragment.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


def search_customers(name: str) -> list:
    """
    Search customers whose first, middle, or last name contains a fragment.
    Matching is case-insensitive, including accented and non-Latin letters.

    Args:
        name: Name fragment

    Returns:
        List of matching Customer

    Raises:
        NotFoundError: If no customer matches
    """
    db = get_db()
    cursor = db.cursor()

    pattern = _like_pattern(normalize_text(name))
    cursor.execute(f'''
        SELECT {CUSTOMER_COLUMNS}
        FROM customers
        WHERE normalize(first_name) LIKE ? ESCAPE '\\'
           OR normalize(middle_name) LIKE ? ESCAPE '\\'
           OR normalize(last_name) LIKE ? ESCAPE '\\'
        ORDER BY last_name, first_name
    ''', (pattern, pattern, pattern))
    rows = cursor.fetchall()

    if not rows:
        raise NotFoundError(f'No such customer: {name}')
    return [Customer.from_row(row) for row in rows]


def get_top_customers(limit: int = 10) -> list:
    """
    Get the customers with the most reservations.
    Customers without reservations count as zero.

    Args:
        limit: Maximum number of customers to return; negative counts as 0

    Returns:
        List of Customer, each with a `times` reservation count
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT c.id, c.first_name, c.middle_name, c.last_name, c.phone, c.notes,
               COUNT(r.id) AS times
        FROM customers c
        LEFT JOIN reservations r ON r.customer_id = c.id
        GROUP BY c.id
        ORDER BY times DESC, c.last_name, c.first_name
        LIMIT ?
    ''', (max(limit, 0),))

    customers = []
    for row in cursor.fetchall():
        customer = Customer.from_row(row)
        customer.times = row['times']
        customers.append(customer)
    return customers
