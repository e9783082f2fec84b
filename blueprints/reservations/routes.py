"""
Reservation routes.
Handles adding reservations to a customer and editing them.
"""

from flask import render_template, redirect, url_for, flash, current_app, Blueprint

from blueprints.reservations.forms import ReservationForm
from models.customer import get_customer_by_id
from models.reservation import Reservation, get_reservation_by_id
from utils.messages import MESSAGES

reservations_bp = Blueprint('reservations', __name__)


def _flash_form_errors(form):
    """Flash every validation error on a form."""
    for errors in form.errors.values():
        for error in errors:
            flash(error, 'error')


@reservations_bp.route('/<int:customer_id>/add-reservation/', methods=['POST'])
def create(customer_id):
    """Add a reservation for a customer, then return to the customer page."""
    customer = get_customer_by_id(customer_id)
    form = ReservationForm()

    if form.validate_on_submit():
        reservation = Reservation(
            customer_id=customer.id,
            start_at=form.start_at.data,
            num_guests=form.num_guests.data,
            notes=form.notes.data
        )
        reservation.save()

        current_app.logger.info(
            'Created reservation %s for customer %s', reservation.id, customer.id
        )
        flash(MESSAGES['reservation_created'], 'success')
    else:
        _flash_form_errors(form)

    return redirect(url_for('customers.detail', customer_id=customer.id))


@reservations_bp.route('/edit-reservation/<int:reservation_id>', methods=['GET', 'POST'])
def edit(reservation_id):
    """
    Edit a reservation. The owning customer cannot be changed.

    GET: Display form filled with the current values
    POST: Save changes and redirect to the customer page
    """
    reservation = get_reservation_by_id(reservation_id)
    customer = reservation.get_customer()
    form = ReservationForm(obj=reservation)

    if form.validate_on_submit():
        reservation.start_at = form.start_at.data
        reservation.num_guests = form.num_guests.data
        reservation.notes = form.notes.data
        reservation.save()

        current_app.logger.info('Updated reservation %s', reservation.id)
        flash(MESSAGES['reservation_updated'], 'success')
        return redirect(url_for('customers.detail', customer_id=customer.id))

    return render_template(
        'reservations/form.html',
        form=form,
        reservation=reservation,
        customer=customer
    )
