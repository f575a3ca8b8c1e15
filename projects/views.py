"""
Saved projects.

    POST /api/projects        → store a snapshot (201)
    GET  /api/projects        → list, newest first (?userId= filter)
    GET  /api/projects/<id>   → one project
"""

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.http import PayloadError, form_error_response, json_error, parse_json_body

from .forms import ProjectForm
from .models import Project

logger = logging.getLogger(__name__)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def project_collection(request):
    if request.method == "POST":
        return _create_project(request)
    return _list_projects(request)


def _create_project(request):
    try:
        form = ProjectForm(parse_json_body(request))
        if not form.is_valid():
            if form.has_error('county', code='invalid_choice'):
                return json_error("County not found", status=404)
            return form_error_response(form)

        project = form.save()
        logger.info(
            f"💾 Project #{project.id} saved: {project.county.name}, "
            f"{project.system_size} kWp, {project.estimated_cost:,.0f} KSh"
        )
        return JsonResponse(project.to_dict(), status=201)

    except PayloadError as e:
        return json_error(str(e), status=400)
    except Exception as e:
        logger.error(f"❌ Project creation failed: {e}", exc_info=True)
        return json_error("Failed to create project", status=500)


def _list_projects(request):
    try:
        projects = Project.objects.all()

        # Non-numeric values are ignored rather than rejected
        user_id = request.GET.get('userId', '')
        if user_id.isdigit():
            projects = projects.filter(user_id=int(user_id))

        return JsonResponse([project.to_dict() for project in projects], safe=False)

    except Exception as e:
        logger.error(f"❌ Project listing failed: {e}", exc_info=True)
        return json_error("Failed to fetch projects", status=500)


@require_http_methods(["GET"])
def project_detail(request, project_id):
    try:
        project = Project.objects.get(id=project_id)
    except Project.DoesNotExist:
        return json_error("Project not found", status=404)

    return JsonResponse(project.to_dict())
