# projects/forms.py
"""
Validation of saved project snapshots.
"""

from django import forms
from django.core.exceptions import ValidationError

from core.fields import StrictFloatField

from .models import Project


class ProjectForm(forms.ModelForm):
    """
    Body of POST /api/projects.

    Accepts the API's ``countyId``/``userId`` keys (snake_cased by the view)
    as aliases of the model's foreign keys.
    """

    FIELD_ALIASES = {
        'county_id': 'county',
        'user_id': 'user',
    }

    class Meta:
        model = Project
        fields = [
            'user',
            'county',
            'daily_usage',
            'monthly_usage',
            'system_size',
            'estimated_cost',
            'monthly_savings',
            'payback_period',
            'appliances',
        ]
        field_classes = {
            name: StrictFloatField
            for name in (
                'daily_usage',
                'monthly_usage',
                'system_size',
                'estimated_cost',
                'monthly_savings',
                'payback_period',
            )
        }

    def __init__(self, data=None, *args, **kwargs):
        if data is not None:
            data = dict(data)
            for alias, field in self.FIELD_ALIASES.items():
                if alias in data and field not in data:
                    data[field] = data.pop(alias)
        super().__init__(data, *args, **kwargs)

    def clean_appliances(self):
        appliances = self.cleaned_data.get('appliances')
        if appliances is not None and not isinstance(appliances, list):
            raise ValidationError("Appliances must be a list.", code='invalid')
        return appliances
