"""
Shared validators for the core module.

Numeric checks used by the catalog models and the calculation forms.
Every check raises django.core.exceptions.ValidationError so that forms
and model.full_clean() report the problem to the caller.
"""

import math

from django.core.exceptions import ValidationError


# ==============================================================================
# GENERIC NUMBERS
# ==============================================================================

def validate_finite(value):
    """
    Rejects NaN and infinite values.

    Raises:
        ValidationError: If value is not a finite number
    """
    if value is None:
        return
    if not math.isfinite(float(value)):
        raise ValidationError(
            f"{value} is not a finite number.",
            code='not_finite',
        )


def validate_non_negative(value):
    """
    Rejects negative values (zero is allowed).

    Raises:
        ValidationError: If value < 0
    """
    validate_finite(value)
    if value is not None and value < 0:
        raise ValidationError(
            f"{value} must be zero or positive.",
            code='negative',
        )


def validate_positive(value):
    """
    Rejects zero and negative values.

    Raises:
        ValidationError: If value <= 0
    """
    validate_finite(value)
    if value is not None and value <= 0:
        raise ValidationError(
            f"{value} must be strictly positive.",
            code='not_positive',
        )


# ==============================================================================
# SOLAR SPECIFIC
# ==============================================================================

def validate_hours_per_day(value):
    """
    Daily operating hours must lie between 0 and 24.

    Raises:
        ValidationError: If value is outside [0, 24]
    """
    validate_finite(value)
    if value is not None and not 0 <= value <= 24:
        raise ValidationError(
            f"Invalid daily usage: {value} h. Must be between 0 and 24 hours.",
            code='hours_out_of_range',
        )


def validate_peak_sun_hours(value):
    """
    Peak sun hours per day must be positive and physically plausible.

    The highest annual averages on Earth stay below 8 h/day; 12 h is a
    generous ceiling that still catches unit mistakes (kWh/m²/year).

    Raises:
        ValidationError: If value is outside (0, 12]
    """
    validate_finite(value)
    if value is not None and not 0 < value <= 12:
        raise ValidationError(
            f"Invalid peak sun hours: {value}. Must be in (0, 12] h/day.",
            code='peak_sun_hours_out_of_range',
        )


def validate_rating(value):
    """
    Installer ratings use a 1 to 5 scale.

    Raises:
        ValidationError: If value is outside [1, 5]
    """
    validate_finite(value)
    if value is not None and not 1 <= value <= 5:
        raise ValidationError(
            f"Invalid rating: {value}. Must be between 1 and 5.",
            code='rating_out_of_range',
        )
