"""
Charts for the PDF reports.
Uses matplotlib with the Agg backend, images are embedded as base64.
"""

import matplotlib
matplotlib.use('Agg')  # No display backend on servers
import matplotlib.pyplot as plt
import io
import base64
from typing import List, Dict
import logging

logger = logging.getLogger(__name__)

plt.style.use('seaborn-v0_8-darkgrid')
COLORS = {
    'primary': '#f59e0b',
    'success': '#10b981',
    'danger': '#ef4444',
}

MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


class ChartGenerator:
    """
    Chart generator for project reports.
    """

    @staticmethod
    def _fig_to_base64(fig) -> str:
        buffer = io.BytesIO()
        fig.savefig(buffer, format='png', dpi=150, bbox_inches='tight', facecolor='white')
        buffer.seek(0)
        image_base64 = base64.b64encode(buffer.read()).decode()
        plt.close(fig)
        return f"data:image/png;base64,{image_base64}"

    @staticmethod
    def generate_roi_evolution_chart(projections: List[Dict]) -> str:
        """
        Cumulative savings over the projection horizon.

        Args:
            projections: rows with 'year' and 'cumulativeSavings'

        Returns:
            PNG data URI
        """
        fig, ax = plt.subplots(figsize=(10, 5))

        years = [p['year'] for p in projections]
        cumulative = [p['cumulativeSavings'] for p in projections]

        ax.plot(years, cumulative, linewidth=2.5, color=COLORS['success'], label='Cumulative savings')
        ax.fill_between(years, 0, cumulative, alpha=0.3, color=COLORS['success'])
        ax.axhline(y=0, color='red', linestyle='--', linewidth=1, alpha=0.5)

        # First year in the black
        for year, value in zip(years, cumulative):
            if value >= 0:
                ax.plot(year, value, 'ro', markersize=10)
                ax.annotate(f'Payback: year {year}',
                            xy=(year, value),
                            xytext=(20, -20), textcoords='offset points',
                            fontsize=10, color='red', fontweight='bold',
                            bbox=dict(boxstyle='round,pad=0.5', facecolor='white', edgecolor='red'),
                            arrowprops=dict(arrowstyle='->', color='red'))
                break

        ax.set_xlabel('Year', fontsize=12, fontweight='bold')
        ax.set_ylabel('Cumulative savings (KSh)', fontsize=12, fontweight='bold')
        ax.set_title('Return on Investment (25 years)', fontsize=14, fontweight='bold', pad=20)
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=10)

        return ChartGenerator._fig_to_base64(fig)

    @staticmethod
    def generate_bill_evolution_chart(projections: List[Dict]) -> str:
        """
        Yearly grid bill against yearly solar cost.

        Args:
            projections: rows with 'year', 'gridCost' and 'solarCost'
        """
        fig, ax = plt.subplots(figsize=(10, 5))

        years = [p['year'] for p in projections]
        grid_cost = [p['gridCost'] for p in projections]
        solar_cost = [p['solarCost'] for p in projections]

        ax.plot(years, grid_cost, linewidth=2.5, color=COLORS['danger'],
                label='Grid only', linestyle='--')
        ax.plot(years, solar_cost, linewidth=2.5, color=COLORS['success'],
                label='With solar')

        ax.set_xlabel('Year', fontsize=12, fontweight='bold')
        ax.set_ylabel('Yearly cost (KSh)', fontsize=12, fontweight='bold')
        ax.set_title('Electricity Cost Evolution', fontsize=14, fontweight='bold', pad=20)
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=10)

        return ChartGenerator._fig_to_base64(fig)

    @staticmethod
    def generate_monthly_irradiation_chart(monthly_data: List[Dict]) -> str:
        """
        Daily irradiation per month (PVGIS breakdown).

        Args:
            monthly_data: rows with 'month' (1-12) and 'irradiation' (kWh/m²/day)
        """
        fig, ax = plt.subplots(figsize=(10, 5))

        labels = [MONTHS[row['month'] - 1] for row in monthly_data]
        values = [row['irradiation'] for row in monthly_data]

        ax.bar(labels, values, color=COLORS['primary'], alpha=0.8)

        ax.set_xlabel('Month', fontsize=12, fontweight='bold')
        ax.set_ylabel('Irradiation (kWh/m²/day)', fontsize=12, fontweight='bold')
        ax.set_title('Monthly Solar Resource', fontsize=14, fontweight='bold', pad=20)
        ax.grid(True, alpha=0.3, axis='y')

        return ChartGenerator._fig_to_base64(fig)
