"""
Tests for the 25-year ROI projection
financial/tests/test_roi_calculator.py
"""

import unittest

import pytest

from financial.services import ROICalculator, calculate_co2_impact, calculate_roi


class TestROIProjection(unittest.TestCase):
    """Year-by-year table"""

    def setUp(self):
        self.calculator = ROICalculator(
            system_size=5,
            system_cost=600000,
            daily_usage=10,
            electricity_rate=25,
            annual_increase=5,
        )
        self.projections = self.calculator.calculate_projection()

    def test_monthly_grid_cost(self):
        self.assertEqual(self.calculator.monthly_grid_cost, 7500)

    def test_always_25_rows(self):
        self.assertEqual(len(self.projections), 25)
        self.assertEqual([p.year for p in self.projections], list(range(1, 26)))

    def test_first_year_carries_investment(self):
        first = self.projections[0]

        self.assertAlmostEqual(first.grid_cost, 90000)
        self.assertAlmostEqual(first.solar_cost, 610000)  # 600000 + 5 kWp × 2000
        self.assertAlmostEqual(first.cumulative_savings, -520000)

    def test_following_years_only_maintenance(self):
        for projection in self.projections[1:]:
            self.assertEqual(projection.solar_cost, 10000)

    def test_grid_cost_compounds(self):
        self.assertAlmostEqual(self.projections[1].grid_cost, 94500)
        self.assertAlmostEqual(self.projections[24].grid_cost, 90000 * 1.05 ** 24)

    def test_cumulative_is_running_sum(self):
        running = 0
        for projection in self.projections:
            running += projection.grid_cost - projection.solar_cost
            self.assertAlmostEqual(projection.cumulative_savings, running, places=6)

    def test_production_factor_is_informational(self):
        self.assertEqual(self.projections[0].production_factor, 1)
        self.assertAlmostEqual(self.projections[24].production_factor, 0.993 ** 24)
        self.assertNotIn('productionFactor', self.projections[0].to_dict())


class TestPaybackPeriod(unittest.TestCase):
    """Payback interpolation and its boundaries"""

    def test_interpolated_payback(self):
        result = calculate_roi(5, 600000, 10, 25, 5)

        # Cumulative turns positive in year 7: 6 + 47827.85 / 110608.61
        self.assertAlmostEqual(result.payback_period, 6.4324, places=4)

    def test_payback_in_first_year(self):
        result = calculate_roi(system_size=1, system_cost=1000, daily_usage=10, electricity_rate=25)

        self.assertEqual(result.payback_period, 1)
        self.assertAlmostEqual(result.monthly_savings, 7500 - 1000 / 12)
        self.assertAlmostEqual(result.annual_savings, 90000 - 1000)

    def test_never_paid_back(self):
        result = calculate_roi(
            system_size=5, system_cost=600000, daily_usage=0.1, electricity_rate=1, annual_increase=0,
        )

        self.assertEqual(result.payback_period, 25)
        self.assertLess(result.year_by_year[-1].cumulative_savings, 0)
        # 3 KSh/month of grid cost, 600000 spread over 300 months
        self.assertAlmostEqual(result.monthly_savings, 3 - 2000)

    def test_payback_between_bounds(self):
        for cost in (50000, 300000, 900000, 2500000):
            result = calculate_roi(5, cost, 12, 25)
            self.assertGreaterEqual(result.payback_period, 1)
            self.assertLessEqual(result.payback_period, 25)

    def test_higher_cost_never_shortens_payback(self):
        paybacks = [calculate_roi(5, cost, 10, 25).payback_period for cost in (200000, 400000, 800000)]
        self.assertEqual(paybacks, sorted(paybacks))


class TestROISummary:
    """Summary figures and serialization"""

    def test_twenty_year_savings_is_row_20(self):
        result = calculate_roi(5, 600000, 10, 25)

        assert result.twenty_year_savings == result.year_by_year[19].cumulative_savings

    def test_savings_derived_from_payback(self):
        result = calculate_roi(5, 600000, 10, 25)

        assert result.monthly_savings == pytest.approx(7500 - 600000 / (result.payback_period * 12))
        assert result.annual_savings == pytest.approx(90000 - 600000 / result.payback_period)

    def test_to_dict(self):
        payload = calculate_roi(5, 600000, 10, 25).to_dict()

        assert set(payload) == {
            'monthlySavings', 'annualSavings', 'paybackPeriod', 'twentyYearSavings', 'yearByYearAnalysis',
        }
        assert set(payload['yearByYearAnalysis'][0]) == {'year', 'gridCost', 'solarCost', 'cumulativeSavings'}

    def test_deterministic(self):
        assert calculate_roi(3.2, 420000, 8.5, 27, 6).to_dict() == calculate_roi(3.2, 420000, 8.5, 27, 6).to_dict()


class TestCO2Impact:
    """Environmental figures"""

    def test_offset_and_trees(self):
        impact = calculate_co2_impact(3000)

        assert impact['carbon_offset_kg'] == pytest.approx(1500)
        assert impact['trees_equivalent'] == pytest.approx(60)
