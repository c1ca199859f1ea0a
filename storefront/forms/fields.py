"""Form fields that accept typed JSON values instead of form strings."""

import math
import re

from wtforms import Field, FloatField, IntegerField, StringField


class JSONStringField(StringField):
    """String field that rejects non-string JSON values."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        if not isinstance(value, str):
            self.data = None
            raise ValueError(self.gettext('Not a valid string value.'))
        self.data = value


class JSONIntegerField(IntegerField):
    """Integer field that accepts JSON integers and digit strings only."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        if isinstance(value, int) and not isinstance(value, bool):
            self.data = value
        elif isinstance(value, str) and re.fullmatch(r'-?[0-9]+', value.strip()):
            self.data = int(value)
        else:
            self.data = None
            raise ValueError(self.gettext('Not a valid integer value.'))


class JSONFloatField(FloatField):
    """Number field that accepts finite JSON numbers and numeric strings."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        self.data = None
        if isinstance(value, bool):
            raise ValueError(self.gettext('Not a valid float value.'))
        if isinstance(value, (int, float)):
            number = value
        elif isinstance(value, str):
            try:
                number = float(value)
            except ValueError:
                raise ValueError(self.gettext('Not a valid float value.'))
        else:
            raise ValueError(self.gettext('Not a valid float value.'))
        if not math.isfinite(number):
            raise ValueError(self.gettext('Not a valid float value.'))
        self.data = number


class TagListField(Field):
    """List of strings. JSON arrays arrive as repeated values for one key."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        if not all(isinstance(tag, str) for tag in valuelist):
            self.data = None
            raise ValueError(self.gettext('Tags must be strings.'))
        self.data = list(valuelist)
