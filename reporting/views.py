"""
Project reports.

    GET /api/projects/<id>/report      → report data (JSON)
    GET /api/projects/<id>/report.pdf  → PDF download
"""

import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from core.http import json_error
from projects.models import Project

from .services.pdf_generator import PDFGenerator
from .services.report_builder import build_report_data

logger = logging.getLogger(__name__)


def _get_project(project_id):
    return Project.objects.select_related('county').filter(id=project_id).first()


@require_http_methods(["GET"])
def project_report(request, project_id):
    project = _get_project(project_id)
    if project is None:
        return json_error("Project not found", status=404)

    try:
        return JsonResponse(build_report_data(project, project.county))
    except Exception as e:
        logger.error(f"❌ Report generation failed for project #{project_id}: {e}", exc_info=True)
        return json_error("Failed to generate report", status=500)


@require_http_methods(["GET"])
def project_report_pdf(request, project_id):
    """
    Generates the PDF and returns it as an attachment.
    """
    project = _get_project(project_id)
    if project is None:
        return json_error("Project not found", status=404)

    try:
        pdf_content = PDFGenerator(project).generate()
    except Exception as e:
        logger.error(f"❌ PDF generation failed for project #{project_id}: {e}", exc_info=True)
        return json_error("Failed to generate PDF report", status=500)

    filename = f"solar_report_{project.county.name.lower().replace(' ', '_')}_{project.id}.pdf"
    response = HttpResponse(pdf_content, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    logger.info(f"✅ PDF downloaded for project #{project_id}")
    return response
