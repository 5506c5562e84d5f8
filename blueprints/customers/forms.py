"""
Customer forms using Flask-WTF.
Field names on the wire are 'Name' and 'Email'.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, EmailField
from wtforms.validators import DataRequired, Length, Regexp

from utils.messages import get_message
from utils.validators import EMAIL_PATTERN, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class CustomerForm(FlaskForm):
    """Create/edit form for a customer."""

    name = StringField('Name', name='Name', filters=[_strip], validators=[
        DataRequired(message=get_message('name_required')),
        Length(max=NAME_MAX_LENGTH, message=get_message('name_too_long', max=NAME_MAX_LENGTH))
    ])

    email = EmailField('Email', name='Email', filters=[_strip], validators=[
        DataRequired(message=get_message('email_required')),
        Length(max=EMAIL_MAX_LENGTH, message=get_message('email_too_long', max=EMAIL_MAX_LENGTH)),
        Regexp(EMAIL_PATTERN, message=get_message('invalid_email'))
    ])
