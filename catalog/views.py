"""
Read-only JSON views over the reference catalog.
"""

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from core.http import json_error
from weather.services import get_county_solar_data

from .models import Appliance, County, Installer

logger = logging.getLogger(__name__)


# ============== APPLIANCES ==============

@require_http_methods(["GET"])
def appliance_list(request):
    """
    Lists the appliance catalog, optionally filtered by ?category=.
    """
    appliances = Appliance.objects.all()

    category = request.GET.get('category')
    if category:
        appliances = appliances.filter(category=category).order_by('name')

    return JsonResponse([appliance.to_dict() for appliance in appliances], safe=False)


@require_http_methods(["GET"])
def appliance_detail(request, appliance_id):
    try:
        appliance = Appliance.objects.get(id=appliance_id)
    except Appliance.DoesNotExist:
        return json_error("Appliance not found", status=404)

    return JsonResponse(appliance.to_dict())


# ============== COUNTIES ==============

@require_http_methods(["GET"])
def county_list(request):
    counties = County.objects.all()
    return JsonResponse([county.to_dict() for county in counties], safe=False)


@require_http_methods(["GET"])
def county_detail(request, county_id):
    """
    Returns a county with its solar resource.

    When PVGIS lookups are enabled, irradiance and peak sun hours come from
    the PVGIS cache/API and a monthly breakdown is added; otherwise the
    stored county values are returned.
    """
    try:
        county = County.objects.get(id=county_id)
    except County.DoesNotExist:
        return json_error("County not found", status=404)

    solar_data = get_county_solar_data(county)

    payload = county.to_dict()
    payload.update({
        'irradiance': solar_data['irradiance'],
        'peakSunHours': solar_data['peak_sun_hours'],
        'monthlyData': solar_data.get('monthly_data'),
    })
    return JsonResponse(payload)


@require_http_methods(["GET"])
def county_installers(request, county_id):
    """Installers operating in the given county."""
    if not County.objects.filter(id=county_id).exists():
        return json_error("County not found", status=404)

    installers = Installer.objects.filter(counties__id=county_id).prefetch_related('counties')
    return JsonResponse([installer.to_dict() for installer in installers], safe=False)


# ============== INSTALLERS ==============

@require_http_methods(["GET"])
def installer_list(request):
    """
    Lists installers, verified first, optionally filtered by ?countyId=.

    A non-numeric countyId is ignored and the full list is returned.
    """
    installers = Installer.objects.prefetch_related('counties')

    county_id = request.GET.get('countyId', '')
    if county_id.isdigit():
        installers = installers.filter(counties__id=int(county_id))

    return JsonResponse([installer.to_dict() for installer in installers], safe=False)


@require_http_methods(["GET"])
def installer_detail(request, installer_id):
    try:
        installer = Installer.objects.prefetch_related('counties').get(id=installer_id)
    except Installer.DoesNotExist:
        return json_error("Installer not found", status=404)

    return JsonResponse(installer.to_dict())
