"""
Services for the solar_calc app.
"""

from .calculator import (
    calculate_daily_usage,
    estimate_usage_from_bill,
    summarize_usage,
    calculate_system_size,
    calculate_system_cost,
)

__all__ = [
    'calculate_daily_usage',
    'estimate_usage_from_bill',
    'summarize_usage',
    'calculate_system_size',
    'calculate_system_cost',
]
