"""
Centralized UI messages.
All user-facing text in one place for consistency.
"""

MESSAGES = {
    # Success messages
    'customer_created': 'Customer {name} added',
    'customer_updated': 'Customer {name} updated',
    'reservation_created': 'Reservation added',
    'reservation_updated': 'Reservation updated',

    # Error messages
    'name_required': 'Enter a name to search for',
    'not_found': 'The requested page could not be found',
    'server_error': 'Something went wrong',
}
