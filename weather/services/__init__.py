"""
Services for the weather app.
"""

from .pvgis import (
    PVGISClient,
    fetch_county_solar_data,
    get_county_solar_data,
    stored_solar_data,
)

__all__ = [
    'PVGISClient',
    'fetch_county_solar_data',
    'get_county_solar_data',
    'stored_solar_data',
]
