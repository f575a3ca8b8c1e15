"""
Form fields shared by the JSON endpoints.
"""

from django import forms
from django.core.exceptions import ValidationError


class StrictFloatField(forms.FloatField):
    """
    FloatField that refuses JSON booleans.

    Django's FloatField calls float() on the raw value, so ``true`` would
    clean to 1.0.
    """

    def to_python(self, value):
        if isinstance(value, bool):
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)
