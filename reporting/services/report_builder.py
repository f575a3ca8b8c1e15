"""
Report data for a saved project.

Sizes are re-derived from the stored system size with the same panel and
inverter policy as the sizer; production uses the county's peak sun hours.
"""

import math
import logging
from typing import Any, Dict, Optional

from financial.services import calculate_co2_impact
from solar_calc.services.calculator import (
    DAYS_PER_YEAR,
    INVERTER_OVERSIZE,
    PANEL_WATTAGE_W,
    SYSTEM_LOSSES,
)
from weather.services import get_county_solar_data

logger = logging.getLogger(__name__)

PANEL_TYPE = f"Monocrystalline {PANEL_WATTAGE_W}W"

# Roof space needed per installed kWp
ROOF_AREA_PER_KWP = 6  # m²

# Horizon of the simple ROI percentage
ROI_YEARS = 25


def build_report_data(project, county, solar_data: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Builds the four report sections of a project.

    Args:
        project: projects.Project
        county: catalog.County of the project
        solar_data: Result of get_county_solar_data, looked up when omitted

    Returns:
        dict: projectDetails, systemDetails, financialAnalysis, environmentalImpact
    """
    if solar_data is None:
        solar_data = get_county_solar_data(county)
    peak_sun_hours = solar_data['peak_sun_hours']
    system_size = project.system_size

    panel_count = math.ceil((system_size * 1000) / PANEL_WATTAGE_W)
    inverter_size = math.ceil(system_size * INVERTER_OVERSIZE)
    roof_area_needed = system_size * ROOF_AREA_PER_KWP

    annual_generation = system_size * peak_sun_hours * DAYS_PER_YEAR * (1 - SYSTEM_LOSSES)
    impact = calculate_co2_impact(annual_generation)

    roi = (project.monthly_savings * 12 * ROI_YEARS) / project.estimated_cost * 100

    logger.info(
        f"📄 Report data for project #{project.id}: {annual_generation:,.0f} kWh/year, ROI {roi:.0f}%"
    )

    return {
        'projectDetails': {
            'location': county.name,
            'date': project.created_at.isoformat() if project.created_at else None,
            'dailyUsage': project.daily_usage,
            'monthlyUsage': project.monthly_usage,
        },
        'systemDetails': {
            'systemSize': system_size,
            'panelCount': panel_count,
            'panelType': PANEL_TYPE,
            'inverterSize': inverter_size,
            'roofAreaNeeded': roof_area_needed,
            'annualGeneration': annual_generation,
        },
        'financialAnalysis': {
            'systemCost': project.estimated_cost,
            'monthlySavings': project.monthly_savings,
            'paybackPeriod': project.payback_period,
            'roi': roi,
        },
        'environmentalImpact': {
            'carbonOffset': impact['carbon_offset_kg'],
            'treesEquivalent': impact['trees_equivalent'],
        },
    }
