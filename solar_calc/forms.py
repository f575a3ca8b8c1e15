# solar_calc/forms.py
"""
Forms validating the calculation requests.

The views bind them to the JSON body (keys already converted to
snake_case), so every numeric rule lives here rather than in the engine.
Upper bounds keep the 25-year projection within float range.
"""

from django import forms
from django.core.exceptions import ValidationError

from core.fields import StrictFloatField
from core.validators import (
    validate_hours_per_day,
    validate_non_negative,
    validate_positive,
)


# ==============================================================================
# INPUT LIMITS
# ==============================================================================

MAX_APPLIANCE_QUANTITY = 10_000
MAX_BILL_KSH = 1_000_000_000           # KSh/month
MAX_DAILY_USAGE_KWH = 100_000          # kWh/day
MAX_ROOF_AREA_M2 = 1_000_000
MAX_SYSTEM_SIZE_KW = 100_000           # kWp
MAX_SYSTEM_COST_KSH = 1_000_000_000_000
MAX_ELECTRICITY_RATE = 1_000           # KSh/kWh
MIN_ANNUAL_INCREASE = -100             # %
MAX_ANNUAL_INCREASE = 100              # %


class ApplianceSelectionForm(forms.Form):
    """One appliance picked by the user"""

    id = forms.IntegerField(min_value=1)
    quantity = forms.IntegerField(min_value=1, max_value=MAX_APPLIANCE_QUANTITY)

    # Empty → the appliance's typical daily hours
    hours_per_day = StrictFloatField(required=False, validators=[validate_hours_per_day])


class ApplianceListField(forms.Field):
    """
    A JSON list of appliance selections.

    Each item is validated with ApplianceSelectionForm; the cleaned value is
    the list of cleaned_data dicts.
    """

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if not isinstance(value, list):
            raise ValidationError("Appliances must be a list.", code='invalid')
        return value

    def clean(self, value):
        items = super().clean(value)

        selections = []
        for position, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                raise ValidationError(f"Appliance #{position} must be an object.", code='invalid')

            form = ApplianceSelectionForm(item)
            if not form.is_valid():
                field, messages = next(iter(form.errors.items()))
                raise ValidationError(
                    f"Appliance #{position} ({field}): {messages[0]}",
                    code='invalid_appliance',
                )
            selections.append(form.cleaned_data)

        return selections


class EnergyCalculationForm(forms.Form):
    """
    Body of POST /api/calculate/energy.

    Either a non-empty appliance list or a positive bill amount is required.
    """

    appliances = ApplianceListField(required=False)
    bill_amount = StrictFloatField(
        required=False, max_value=MAX_BILL_KSH, validators=[validate_non_negative]
    )
    county_id = forms.IntegerField()

    def clean(self):
        cleaned_data = super().clean()

        if 'appliances' in self.errors or 'bill_amount' in self.errors:
            return cleaned_data

        if not cleaned_data.get('appliances') and not cleaned_data.get('bill_amount'):
            raise ValidationError(
                "Either appliances or billAmount must be provided",
                code='missing_usage_source',
            )

        return cleaned_data


class SystemSizingForm(forms.Form):
    """Body of POST /api/calculate/system"""

    daily_usage = StrictFloatField(max_value=MAX_DAILY_USAGE_KWH, validators=[validate_positive])
    county_id = forms.IntegerField()

    # Accepted for forward compatibility; sizing does not use it yet
    roof_area = StrictFloatField(
        required=False, max_value=MAX_ROOF_AREA_M2, validators=[validate_non_negative]
    )

    include_storage = forms.BooleanField(required=False)


class ROICalculationForm(forms.Form):
    """Body of POST /api/calculate/roi"""

    DEFAULT_ANNUAL_INCREASE = 5  # %

    system_size = StrictFloatField(max_value=MAX_SYSTEM_SIZE_KW, validators=[validate_positive])
    system_cost = StrictFloatField(max_value=MAX_SYSTEM_COST_KSH, validators=[validate_positive])
    daily_usage = StrictFloatField(max_value=MAX_DAILY_USAGE_KWH, validators=[validate_positive])
    electricity_rate = StrictFloatField(max_value=MAX_ELECTRICITY_RATE, validators=[validate_positive])
    county_id = forms.IntegerField()
    annual_increase = StrictFloatField(
        required=False, min_value=MIN_ANNUAL_INCREASE, max_value=MAX_ANNUAL_INCREASE
    )

    def clean_annual_increase(self):
        value = self.cleaned_data.get('annual_increase')
        if value is None:
            return self.DEFAULT_ANNUAL_INCREASE
        return value
