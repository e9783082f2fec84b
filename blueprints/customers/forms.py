"""
Customer forms using Flask-WTF.
Presence checks only; phone and notes are free text.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Optional, Length


class CustomerForm(FlaskForm):
    """Create/edit customer form."""

    first_name = StringField('First Name', validators=[
        DataRequired(message='First name is required')
    ])

    middle_name = StringField('Middle Name', validators=[Optional()])

    last_name = StringField('Last Name', validators=[
        DataRequired(message='Last name is required')
    ])

    phone = StringField('Phone', validators=[Optional(), Length(max=50)])

    notes = TextAreaField('Notes', validators=[Optional()])


class SearchForm(FlaskForm):
    """Customer name search form."""

    name = StringField('Name', validators=[
        DataRequired(message='Enter a name to search for')
    ])
