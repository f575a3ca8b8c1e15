"""
PDF report generation.
Renders an HTML template and converts it with WeasyPrint.
"""

import logging
from datetime import datetime

from django.conf import settings
from django.template.loader import render_to_string

from financial.services import calculate_roi
from solar_calc.services.calculator import ELECTRICITY_TARIFF_KSH
from weather.services import get_county_solar_data
from reporting.services.chart_generator import ChartGenerator
from reporting.services.report_builder import build_report_data

logger = logging.getLogger(__name__)


class PDFGenerator:
    """
    PDF report of a saved project.
    """

    TEMPLATE_NAME = 'reporting/project_report.html'

    # Rows shown in the projection table
    KEY_YEARS = (1, 5, 10, 15, 20, 25)

    def __init__(self, project):
        """
        Args:
            project: projects.Project
        """
        self.project = project
        self.county = project.county

    def generate(self) -> bytes:
        """
        Generates the PDF.

        Returns:
            bytes: PDF content
        """
        # Needs pango/cairo system libraries, only loaded when a PDF is requested
        from weasyprint import HTML
        from weasyprint.text.fonts import FontConfiguration

        logger.info(f"🔄 PDF generation for project #{self.project.id}")

        html_string = self.render_html()

        font_config = FontConfiguration()
        pdf_file = HTML(string=html_string, base_url=settings.STATIC_URL).write_pdf(
            font_config=font_config
        )

        logger.info(f"✅ PDF generated: {len(pdf_file)} bytes")
        return pdf_file

    def render_html(self) -> str:
        return render_to_string(self.TEMPLATE_NAME, self.prepare_context())

    def prepare_context(self):
        """
        Template context: report sections, projection table and charts.
        """
        solar_data = get_county_solar_data(self.county)
        report = build_report_data(self.project, self.county, solar_data=solar_data)

        # Projection at the standard tariff for the charts
        roi = calculate_roi(
            system_size=self.project.system_size,
            system_cost=self.project.estimated_cost,
            daily_usage=self.project.daily_usage,
            electricity_rate=ELECTRICITY_TARIFF_KSH,
        )
        projections = [row.to_dict() for row in roi.year_by_year]

        chart_gen = ChartGenerator()

        try:
            chart_roi = chart_gen.generate_roi_evolution_chart(projections)
        except Exception as e:
            logger.error(f"ROI chart generation failed: {e}")
            chart_roi = None

        try:
            chart_bill = chart_gen.generate_bill_evolution_chart(projections)
        except Exception as e:
            logger.error(f"Bill chart generation failed: {e}")
            chart_bill = None

        chart_irradiation = None
        if solar_data.get('monthly_data'):
            try:
                chart_irradiation = chart_gen.generate_monthly_irradiation_chart(solar_data['monthly_data'])
            except Exception as e:
                logger.error(f"Irradiation chart generation failed: {e}")

        return {
            'generated_on': datetime.now().strftime('%d/%m/%Y'),
            'title': 'Solar Installation Report',
            'project': self.project,
            'report': report,
            'tariff': ELECTRICITY_TARIFF_KSH,
            'projection_table': [row for row in projections if row['year'] in self.KEY_YEARS],
            'charts': {
                'roi_evolution': chart_roi,
                'bill_evolution': chart_bill,
                'monthly_irradiation': chart_irradiation,
            },
        }
