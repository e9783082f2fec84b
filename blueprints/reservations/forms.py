"""
Reservation forms using Flask-WTF.
"""

from flask_wtf import FlaskForm
from wtforms import IntegerField, TextAreaField, DateTimeLocalField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional

# Format submitted by <input type="datetime-local">
START_AT_FORMAT = '%Y-%m-%dT%H:%M'


class ReservationForm(FlaskForm):
    """Create/edit reservation form. The customer comes from the URL."""

    start_at = DateTimeLocalField('Start', format=START_AT_FORMAT, validators=[
        DataRequired(message='Start time is required')
    ])

    num_guests = IntegerField('Number of Guests', validators=[
        InputRequired(message='Number of guests is required'),
        NumberRange(min=1, message='Number of guests must be at least 1')
    ])

    notes = TextAreaField('Notes', validators=[Optional()])
