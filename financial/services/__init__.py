"""
Services for the financial app.
"""

from .roi_calculator import (
    ROICalculator,
    ROIResult,
    YearProjection,
    calculate_roi,
    calculate_co2_impact,
)

__all__ = [
    'ROICalculator',
    'ROIResult',
    'YearProjection',
    'calculate_roi',
    'calculate_co2_impact',
]
