"""Product forms, validated from JSON request bodies."""

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms.validators import DataRequired, Length, NumberRange, StopValidation, ValidationError

from storefront.models import EDITABLE_FIELDS
from .fields import JSONFloatField, JSONIntegerField, JSONStringField, TagListField


class JSONForm(FlaskForm):
    """Form bound to a parsed JSON object instead of ``request.form``.

    ``MultiDict`` spreads a JSON array into repeated values for one key, so
    the shape of each value is checked against the original body: only list
    fields may hold an array, and they must hold nothing else.
    """

    class Meta:
        csrf = False

    def __init__(self, payload, **kwargs):
        super().__init__(formdata=MultiDict(payload), **kwargs)
        self.payload = payload
        self.shape_errors = {}
        for name, field in self._fields.items():
            if name not in payload:
                continue
            is_list = isinstance(payload[name], list)
            if isinstance(field, TagListField) and not is_list:
                self.shape_errors[name] = 'Must be a list of strings'
            elif not isinstance(field, TagListField) and is_list:
                self.shape_errors[name] = 'Must be a single value, not a list'

    def validate(self, extra_validators=None):
        valid = super().validate(extra_validators=extra_validators)
        self.unknown_fields = sorted(set(self.payload) - set(self._fields))
        return valid and not self.shape_errors and not self.unknown_fields

    def error_details(self):
        """Flatten field errors into ``"field: message"`` strings."""
        details = [f'{name}: {message}' for name, message in self.shape_errors.items()]
        details.extend(f'{name}: {message}'
                       for name, messages in self.errors.items()
                       for message in messages)
        details.extend(f'{name}: field is not allowed' for name in self.unknown_fields)
        return details

    def supplied_data(self):
        """Values for the fields present in the request body."""
        return {name: field.data
                for name, field in self._fields.items()
                if name in self.payload and name in EDITABLE_FIELDS}


class OptionalKey:
    """Stop the chain when the key is absent from the body.

    Unlike ``Optional``, an empty string that was actually sent is still
    validated.
    """
    field_flags = {'optional': True}

    def __call__(self, form, field):
        if not field.raw_data:
            field.errors[:] = []
            raise StopValidation()


def _positive(form, field):
    if field.data is not None and field.data <= 0:
        raise ValidationError('Price must be greater than 0')


class ProductCreateForm(JSONForm):
    """New product."""
    name = JSONStringField('Name', validators=[
        DataRequired(message='Name is required'),
        Length(min=2, max=100, message='Name must be between 2 and 100 characters')
    ])
    description = JSONStringField('Description', validators=[
        DataRequired(message='Description is required'),
        Length(min=5, max=500, message='Description must be between 5 and 500 characters')
    ])
    price = JSONFloatField('Price', validators=[
        DataRequired(message='Price is required'),
        _positive
    ])
    category = JSONStringField('Category', validators=[
        DataRequired(message='Category is required'),
        Length(min=2, max=50, message='Category must be between 2 and 50 characters')
    ])
    brand = JSONStringField('Brand', validators=[
        DataRequired(message='Brand is required'),
        Length(min=2, max=50, message='Brand must be between 2 and 50 characters')
    ])
    stock = JSONIntegerField('Stock', default=0, validators=[
        OptionalKey(),
        NumberRange(min=0, message='Stock cannot be negative')
    ])
    tags = TagListField('Tags', default=list)


class ProductUpdateForm(JSONForm):
    """Partial product update; only the supplied fields are checked."""
    name = JSONStringField('Name', validators=[
        OptionalKey(),
        Length(min=2, max=100, message='Name must be between 2 and 100 characters')
    ])
    description = JSONStringField('Description', validators=[
        OptionalKey(),
        Length(min=5, max=500, message='Description must be between 5 and 500 characters')
    ])
    price = JSONFloatField('Price', validators=[OptionalKey(), _positive])
    category = JSONStringField('Category', validators=[
        OptionalKey(),
        Length(min=2, max=50, message='Category must be between 2 and 50 characters')
    ])
    brand = JSONStringField('Brand', validators=[
        OptionalKey(),
        Length(min=2, max=50, message='Brand must be between 2 and 50 characters')
    ])
    stock = JSONIntegerField('Stock', validators=[
        OptionalKey(),
        NumberRange(min=0, message='Stock cannot be negative')
    ])
    # An empty JSON list never reaches the form data, so it falls back to []
    tags = TagListField('Tags', default=list)
