"""
Data contracts for the solar_calc module.
Defines the structures exchanged with the calculation engine.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class ApplianceUsage:
    """
    One line of the user's appliance list.

    Attributes:
        power_w: Rated power of one unit (W)
        quantity: Number of identical units
        hours_per_day: Daily operating hours
        name: Display name (informational)
    """
    power_w: float
    quantity: int
    hours_per_day: float
    name: str = ''

    @classmethod
    def from_appliance(cls, appliance, quantity: int, hours_per_day: Optional[float] = None) -> 'ApplianceUsage':
        """
        Builds a usage line from a catalog Appliance.

        The appliance's typical hours apply when hours_per_day is omitted.
        """
        if hours_per_day is None:
            hours_per_day = appliance.hourly_usage
        return cls(
            power_w=appliance.power,
            quantity=quantity,
            hours_per_day=hours_per_day,
            name=appliance.name,
        )


@dataclass(frozen=True)
class EnergyUsage:
    """
    Estimated consumption of a home or business.

    Attributes:
        daily_usage: kWh per day
        monthly_usage: kWh per month (30 days)
        annual_usage: kWh per year (365 days)
        monthly_bill: Estimated grid bill per month (KSh)
    """
    daily_usage: float
    monthly_usage: float
    annual_usage: float
    monthly_bill: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'dailyUsage': self.daily_usage,
            'monthlyUsage': self.monthly_usage,
            'annualUsage': self.annual_usage,
            'monthlyBill': self.monthly_bill,
        }


@dataclass(frozen=True)
class SystemSizing:
    """
    Recommended solar installation.

    Attributes:
        system_size: Array capacity (kWp, one decimal)
        panel_count: Number of panels
        inverter_size: Inverter rating (kW)
        battery_size: Battery capacity (kWh, 0 without storage)
        daily_production: Expected production (kWh/day)
    """
    system_size: float
    panel_count: int
    inverter_size: int
    battery_size: int
    daily_production: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'systemSize': self.system_size,
            'panelCount': self.panel_count,
            'inverterSize': self.inverter_size,
            'batterySize': self.battery_size,
            'dailyProduction': self.daily_production,
        }


@dataclass(frozen=True)
class CostEstimate:
    """
    Installed cost range (KSh, whole shillings).
    """
    min_cost: int
    max_cost: int
    average_cost: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'minCost': self.min_cost,
            'maxCost': self.max_cost,
            'averageCost': self.average_cost,
        }
