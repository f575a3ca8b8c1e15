# solar_calc/services/calculator.py
"""
Energy usage, system sizing and cost estimation for Kenyan installations.

Every function is pure: same inputs, same outputs, no database access.
Catalog lookups (appliance power, county peak sun hours) are done by the
caller and passed in as plain numbers.
"""

import logging
import math
from typing import Iterable

from solar_calc.contracts import ApplianceUsage, EnergyUsage, SystemSizing, CostEstimate

logger = logging.getLogger(__name__)


# ==============================================================================
# CONSTANTS (Kenya 2024)
# ==============================================================================

# Average Kenya Power tariff, taxes and levies included
ELECTRICITY_TARIFF_KSH = 25  # KSh/kWh

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

# Sizing policy
SYSTEM_LOSSES = 0.2          # 20% (inverter, wiring, dust, temperature)
SAFETY_MARGIN = 1.1          # +10%
PANEL_WATTAGE_W = 400        # Monocrystalline 400 W panels
INVERTER_OVERSIZE = 1.2      # Inverter rated 20% above array size
BATTERY_AUTONOMY_DAYS = 1.5  # Days of storage when batteries are included

# Installed cost (KSh per kWp)
COST_PER_KWP_KSH = 120000
BATTERY_COST_PER_KWP_KSH = 80000
MIN_COST_FACTOR = 0.9        # 10% below average
MAX_COST_FACTOR = 1.2        # 20% above average


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Rounds halves upward (2.5 → 3, 0.25 → 0.3).

    Python's round() rounds half to even, which would shift cost ranges by
    one shilling on exact halves.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


# ==============================================================================
# USAGE
# ==============================================================================

def calculate_daily_usage(appliances: Iterable[ApplianceUsage]) -> float:
    """
    Daily energy use of an appliance list.

    Args:
        appliances: Usage lines (power W, quantity, hours/day)

    Returns:
        float: kWh per day
    """
    total = 0.0
    for appliance in appliances:
        watt_hours = appliance.power_w * appliance.quantity * appliance.hours_per_day
        total += watt_hours / 1000  # Wh → kWh
    return total


def estimate_usage_from_bill(bill_amount: float) -> float:
    """
    Daily energy use implied by a monthly electricity bill.

    Args:
        bill_amount: Monthly bill (KSh)

    Returns:
        float: kWh per day
    """
    monthly_usage = bill_amount / ELECTRICITY_TARIFF_KSH
    return monthly_usage / DAYS_PER_MONTH


def summarize_usage(daily_usage: float) -> EnergyUsage:
    """
    Expands a daily figure into monthly and annual usage plus the grid bill.
    """
    monthly_usage = daily_usage * DAYS_PER_MONTH
    return EnergyUsage(
        daily_usage=daily_usage,
        monthly_usage=monthly_usage,
        annual_usage=daily_usage * DAYS_PER_YEAR,
        monthly_bill=monthly_usage * ELECTRICITY_TARIFF_KSH,
    )


# ==============================================================================
# SIZING
# ==============================================================================

def calculate_system_size(
    daily_usage: float,
    peak_sun_hours: float,
    include_storage: bool = False
) -> SystemSizing:
    """
    Recommends the array, inverter and battery for a daily consumption.

    Args:
        daily_usage: Consumption to cover (kWh/day)
        peak_sun_hours: Location's peak sun hours (h/day)
        include_storage: Size a battery bank as well

    Returns:
        SystemSizing
    """
    performance = 1 - SYSTEM_LOSSES

    raw_size = (daily_usage / (peak_sun_hours * performance)) * SAFETY_MARGIN
    system_size = round_half_up(raw_size, 1)

    panel_count = math.ceil((system_size * 1000) / PANEL_WATTAGE_W)
    inverter_size = math.ceil(system_size * INVERTER_OVERSIZE)
    battery_size = math.ceil(daily_usage * BATTERY_AUTONOMY_DAYS) if include_storage else 0

    daily_production = system_size * peak_sun_hours * performance

    logger.info(
        f"☀️ Sizing: {daily_usage:.2f} kWh/day @ {peak_sun_hours} PSH → "
        f"{system_size} kWp, {panel_count} panels, battery {battery_size} kWh"
    )

    return SystemSizing(
        system_size=system_size,
        panel_count=panel_count,
        inverter_size=inverter_size,
        battery_size=battery_size,
        daily_production=daily_production,
    )


# ==============================================================================
# COST
# ==============================================================================

def calculate_system_cost(system_size: float, include_storage: bool = False) -> CostEstimate:
    """
    Installed cost range for an array size.

    Args:
        system_size: Array capacity (kWp)
        include_storage: Add battery storage cost

    Returns:
        CostEstimate: min/max/average in whole KSh
    """
    battery_cost = system_size * BATTERY_COST_PER_KWP_KSH if include_storage else 0
    total_average_cost = (system_size * COST_PER_KWP_KSH) + battery_cost

    min_cost = int(round_half_up(total_average_cost * MIN_COST_FACTOR))
    max_cost = int(round_half_up(total_average_cost * MAX_COST_FACTOR))

    return CostEstimate(
        min_cost=min_cost,
        max_cost=max_cost,
        average_cost=int(round_half_up((min_cost + max_cost) / 2)),
    )
