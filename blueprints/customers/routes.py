"""
Customer routes.
Handles customer listing, search, top customers, creation and editing.
"""

from flask import render_template, redirect, url_for, flash, current_app, Blueprint

from blueprints.customers.forms import CustomerForm, SearchForm
from blueprints.reservations.forms import ReservationForm
from models.customer import (
    Customer, get_all_customers, get_customer_by_id, search_customers, get_top_customers
)
from utils.messages import MESSAGES

customers_bp = Blueprint('customers', __name__)


def _customer_fields(form):
    """Submitted customer fields; a blank middle name is stored as NULL."""
    return {
        'first_name': form.first_name.data.strip(),
        'middle_name': (form.middle_name.data or '').strip() or None,
        'last_name': form.last_name.data.strip(),
        'phone': form.phone.data,
        'notes': form.notes.data,
    }


@customers_bp.route('/')
def index():
    """Homepage: show list of customers."""
    customers = get_all_customers()
    return render_template('customers/list.html', customers=customers)


@customers_bp.route('/add/', methods=['GET', 'POST'])
def create():
    """
    Add a new customer.

    GET: Display empty form
    POST: Create customer and redirect to its detail page
    """
    form = CustomerForm()

    if form.validate_on_submit():
        customer = Customer(**_customer_fields(form))
        customer.save()

        current_app.logger.info('Created customer %s (%s)', customer.id, customer.full_name)
        flash(MESSAGES['customer_created'].format(name=customer.full_name), 'success')
        return redirect(url_for('customers.detail', customer_id=customer.id))

    return render_template('customers/form.html', form=form, mode='create')


@customers_bp.route('/top-ten/')
def top():
    """Show the customers with the most reservations."""
    limit = current_app.config.get('TOP_CUSTOMERS_LIMIT', 10)
    customers = get_top_customers(limit)
    return render_template('customers/top.html', customers=customers, limit=limit)


@customers_bp.route('/search/', methods=['POST'])
def search():
    """Search customers by name. No match is reported as not found."""
    form = SearchForm()

    if not form.validate_on_submit():
        flash(MESSAGES['name_required'], 'error')
        return redirect(url_for('customers.index'))

    name = form.name.data.strip()
    customers = search_customers(name)
    return render_template('customers/search_results.html', customers=customers, name=name)


@customers_bp.route('/<int:customer_id>/')
def detail(customer_id):
    """Show a customer and their reservations."""
    customer = get_customer_by_id(customer_id)
    reservations = customer.get_reservations()

    return render_template(
        'customers/detail.html',
        customer=customer,
        reservations=reservations,
        reservation_form=ReservationForm(formdata=None)
    )


@customers_bp.route('/<int:customer_id>/edit/', methods=['GET', 'POST'])
def edit(customer_id):
    """
    Edit a customer.

    GET: Display form filled with the current values
    POST: Save changes and redirect to the detail page
    """
    customer = get_customer_by_id(customer_id)
    form = CustomerForm(obj=customer)

    if form.validate_on_submit():
        for field, value in _customer_fields(form).items():
            setattr(customer, field, value)
        customer.save()

        current_app.logger.info('Updated customer %s', customer.id)
        flash(MESSAGES['customer_updated'].format(name=customer.full_name), 'success')
        return redirect(url_for('customers.detail', customer_id=customer.id))

    return render_template('customers/form.html', form=form, mode='edit', customer=customer)
