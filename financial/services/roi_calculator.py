"""
Return-on-investment projection for solar installations in Kenya.
25-year projection with tariff increases, panel degradation and maintenance.
"""

import logging
from typing import Dict, List, Any
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class YearProjection:
    """Year-by-year financial projection."""
    year: int
    grid_cost: float
    solar_cost: float
    annual_savings: float
    cumulative_savings: float
    production_factor: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'year': self.year,
            'gridCost': self.grid_cost,
            'solarCost': self.solar_cost,
            'cumulativeSavings': self.cumulative_savings,
        }


@dataclass
class ROIResult:
    """Summary figures plus the full 25-year table."""
    monthly_savings: float
    annual_savings: float
    payback_period: float
    twenty_year_savings: float
    year_by_year: List[YearProjection]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'monthlySavings': self.monthly_savings,
            'annualSavings': self.annual_savings,
            'paybackPeriod': self.payback_period,
            'twentyYearSavings': self.twenty_year_savings,
            'yearByYearAnalysis': [row.to_dict() for row in self.year_by_year],
        }


class ROICalculator:
    """
    ROI calculator comparing grid electricity with a solar installation.
    """

    PROJECTION_YEARS = 25
    DAYS_PER_MONTH = 30

    # Typical panel output loss per year (0.5-0.8% for monocrystalline)
    ANNUAL_DEGRADATION = 0.007

    # Cleaning, inspections, inverter servicing
    MAINTENANCE_PER_KWP = 2000  # KSh/kWp/year

    # Year whose cumulative savings are reported as "twenty-year savings"
    SUMMARY_YEAR = 20

    def __init__(
        self,
        system_size: float,
        system_cost: float,
        daily_usage: float,
        electricity_rate: float,
        annual_increase: float = 5
    ):
        """
        Initializes the calculator.

        Args:
            system_size: Installed capacity (kWp)
            system_cost: Upfront installed cost (KSh)
            daily_usage: Consumption covered by the system (kWh/day)
            electricity_rate: Current grid tariff (KSh/kWh)
            annual_increase: Grid tariff increase per year (%)
        """
        self.system_size = system_size
        self.system_cost = system_cost
        self.daily_usage = daily_usage
        self.electricity_rate = electricity_rate
        self.annual_increase = annual_increase
        self.monthly_grid_cost = daily_usage * self.DAYS_PER_MONTH * electricity_rate

    def calculate_projection(self) -> List[YearProjection]:
        """
        Simulates each year of the projection horizon.

        Returns:
            List of yearly projections (always PROJECTION_YEARS rows)
        """
        years = np.arange(1, self.PROJECTION_YEARS + 1)
        annual_maintenance = self.system_size * self.MAINTENANCE_PER_KWP

        # Grid tariff compounds every year
        grid_costs = self.monthly_grid_cost * 12 * (1 + self.annual_increase / 100) ** (years - 1)

        # Informational only: costs do not depend on output
        production_factors = (1 - self.ANNUAL_DEGRADATION) ** (years - 1)

        # Year 1 carries the upfront investment
        solar_costs = np.full(self.PROJECTION_YEARS, annual_maintenance, dtype=float)
        solar_costs[0] += self.system_cost

        annual_savings = grid_costs - solar_costs
        cumulative_savings = np.cumsum(annual_savings)

        return [
            YearProjection(
                year=int(years[i]),
                grid_cost=float(grid_costs[i]),
                solar_cost=float(solar_costs[i]),
                annual_savings=float(annual_savings[i]),
                cumulative_savings=float(cumulative_savings[i]),
                production_factor=float(production_factors[i]),
            )
            for i in range(self.PROJECTION_YEARS)
        ]

    def calculate_payback_period(self, projections: List[YearProjection]) -> float:
        """
        Years until cumulative savings offset the investment.

        Interpolates linearly inside the payback year. Returns exactly 1 when
        savings are already non-negative in year 1, and PROJECTION_YEARS when
        payback is never reached.
        """
        for index, projection in enumerate(projections):
            if projection.cumulative_savings < 0:
                continue
            if index == 0:
                return 1

            savings_needed = -projections[index - 1].cumulative_savings
            fraction_of_year = savings_needed / projection.annual_savings
            return projection.year - 1 + fraction_of_year

        return self.PROJECTION_YEARS

    def calculate(self) -> ROIResult:
        """
        Runs the full projection and derives the summary figures.

        Monthly and annual savings are derived from the payback period, so
        that they stay consistent with the interpolated payback point.
        """
        projections = self.calculate_projection()
        payback_period = self.calculate_payback_period(projections)

        if len(projections) >= self.SUMMARY_YEAR:
            twenty_year_savings = projections[self.SUMMARY_YEAR - 1].cumulative_savings
        else:
            twenty_year_savings = 0

        result = ROIResult(
            monthly_savings=self.monthly_grid_cost - (self.system_cost / (payback_period * 12)),
            annual_savings=self.monthly_grid_cost * 12 - (self.system_cost / payback_period),
            payback_period=payback_period,
            twenty_year_savings=twenty_year_savings,
            year_by_year=projections,
        )

        logger.info(
            f"💰 ROI: {self.system_size} kWp for {self.system_cost:,.0f} KSh → "
            f"payback {payback_period:.1f} years, "
            f"20-year savings {twenty_year_savings:,.0f} KSh"
        )

        return result


def calculate_roi(
    system_size: float,
    system_cost: float,
    daily_usage: float,
    electricity_rate: float,
    annual_increase: float = 5
) -> ROIResult:
    """Shortcut building a ROICalculator and running it."""
    return ROICalculator(
        system_size=system_size,
        system_cost=system_cost,
        daily_usage=daily_usage,
        electricity_rate=electricity_rate,
        annual_increase=annual_increase,
    ).calculate()


def calculate_co2_impact(annual_generation_kwh: float) -> Dict[str, float]:
    """
    Environmental impact of the solar production.

    Args:
        annual_generation_kwh: Solar production per year (kWh)

    Returns:
        Dictionary with CO2 avoided and tree equivalent
    """
    # Kenya grid emission factor used for reports
    CO2_PER_KWH = 0.5  # kg CO2/kWh

    carbon_offset = annual_generation_kwh * CO2_PER_KWH

    # One tree absorbs ~25 kg CO2 per year
    trees_equivalent = carbon_offset / 25

    return {
        'carbon_offset_kg': carbon_offset,
        'trees_equivalent': trees_equivalent,
    }
