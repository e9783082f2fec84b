"""
API routes for JSON endpoints.
Provides read-only JSON access to customers and reservations.
"""

from flask import current_app, jsonify, request, Blueprint

from models.customer import get_all_customers, get_customer_by_id, get_top_customers
from models.errors import NotFoundError
from utils.api_response import api_success, api_error

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint.

    Returns:
        JSON with status and version
    """
    return jsonify({
        'status': 'ok',
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
        'app': current_app.config.get('APP_NAME', 'Lunchly')
    })


@api_bp.route('/customers')
def api_customers():
    """
    Get all customers as JSON, ordered by last then first name.

    Returns:
        JSON list of customers
    """
    customers = get_all_customers()
    return api_success(data=[c.to_dict() for c in customers], count=len(customers))


@api_bp.route('/customers/top')
def api_top_customers():
    """
    Get the customers with the most reservations.

    Query params:
        limit: Maximum number of customers (optional, default: TOP_CUSTOMERS_LIMIT)

    Returns:
        JSON list of customers with a 'times' count, or 400 for a bad limit
    """
    limit = request.args.get('limit', current_app.config.get('TOP_CUSTOMERS_LIMIT', 10), type=int)
    if limit < 0:
        return api_error('limit must be a non-negative integer', status=400)

    customers = get_top_customers(limit)

    data = []
    for customer in customers:
        item = customer.to_dict()
        item['times'] = customer.times
        data.append(item)

    return api_success(data=data, count=len(data))


@api_bp.route('/customers/<int:customer_id>')
def api_customer_detail(customer_id):
    """
    Get one customer and their reservations as JSON.

    Returns:
        JSON customer with a 'reservations' list, or 404 error
    """
    try:
        customer = get_customer_by_id(customer_id)
    except NotFoundError as e:
        return api_error(e.message, status=e.status_code)

    data = customer.to_dict()
    data['reservations'] = [r.to_dict() for r in customer.get_reservations()]
    return api_success(data=data)
