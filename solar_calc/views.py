"""
JSON endpoints of the calculation engine.

    POST /api/calculate/energy  → daily/monthly/annual usage
    POST /api/calculate/system  → system sizing and cost range
    POST /api/calculate/roi     → 25-year return on investment
"""

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from catalog.models import Appliance, County
from core.http import PayloadError, form_error_response, json_error, parse_json_body
from financial.services import calculate_roi
from weather.services import get_county_solar_data

from .contracts import ApplianceUsage
from .forms import EnergyCalculationForm, ROICalculationForm, SystemSizingForm
from .services import (
    calculate_daily_usage,
    calculate_system_cost,
    calculate_system_size,
    estimate_usage_from_bill,
    summarize_usage,
)

logger = logging.getLogger(__name__)


def _resolve_appliances(selections):
    """
    Turns validated selections into ApplianceUsage lines.

    Returns:
        (usages, missing_id): missing_id is the first unknown appliance id, or None
    """
    catalog = Appliance.objects.in_bulk([selection['id'] for selection in selections])

    usages = []
    for selection in selections:
        appliance = catalog.get(selection['id'])
        if appliance is None:
            return [], selection['id']
        usages.append(ApplianceUsage.from_appliance(
            appliance,
            quantity=selection['quantity'],
            hours_per_day=selection.get('hours_per_day'),
        ))

    return usages, None


# ============== ENERGY ==============

@csrf_exempt
@require_http_methods(["POST"])
def calculate_energy(request):
    """
    Estimates consumption from an appliance list or a monthly bill.

    The appliance list wins when both are provided.
    """
    try:
        form = EnergyCalculationForm(parse_json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        data = form.cleaned_data

        if not County.objects.filter(id=data['county_id']).exists():
            return json_error("County not found", status=404)

        if data['appliances']:
            usages, missing_id = _resolve_appliances(data['appliances'])
            if missing_id is not None:
                return json_error(f"Appliance not found: {missing_id}", status=404)

            daily_usage = calculate_daily_usage(usages)
            source = f"{len(usages)} appliance(s)"
        else:
            daily_usage = estimate_usage_from_bill(data['bill_amount'])
            source = f"bill of {data['bill_amount']:,.0f} KSh"

        usage = summarize_usage(daily_usage)
        logger.info(f"⚡ Usage from {source}: {usage.daily_usage:.2f} kWh/day")

        return JsonResponse(usage.to_dict())

    except PayloadError as e:
        return json_error(str(e), status=400)
    except Exception as e:
        logger.error(f"❌ Energy calculation failed: {e}", exc_info=True)
        return json_error("Failed to calculate energy usage", status=500)


# ============== SYSTEM ==============

@csrf_exempt
@require_http_methods(["POST"])
def calculate_system(request):
    """
    Sizes the installation for the county's sun and prices it.
    """
    try:
        form = SystemSizingForm(parse_json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        data = form.cleaned_data

        try:
            county = County.objects.get(id=data['county_id'])
        except County.DoesNotExist:
            return json_error("County not found", status=404)

        solar_data = get_county_solar_data(county)

        sizing = calculate_system_size(
            daily_usage=data['daily_usage'],
            peak_sun_hours=solar_data['peak_sun_hours'],
            include_storage=data['include_storage'],
        )
        cost = calculate_system_cost(sizing.system_size, data['include_storage'])

        payload = sizing.to_dict()
        payload.update(cost.to_dict())
        return JsonResponse(payload)

    except PayloadError as e:
        return json_error(str(e), status=400)
    except Exception as e:
        logger.error(f"❌ System sizing failed: {e}", exc_info=True)
        return json_error("Failed to calculate system size", status=500)


# ============== ROI ==============

@csrf_exempt
@require_http_methods(["POST"])
def calculate_roi_view(request):
    """
    Projects grid vs solar costs over 25 years.
    """
    try:
        form = ROICalculationForm(parse_json_body(request))
        if not form.is_valid():
            return form_error_response(form)
        data = form.cleaned_data

        if not County.objects.filter(id=data['county_id']).exists():
            return json_error("County not found", status=404)

        result = calculate_roi(
            system_size=data['system_size'],
            system_cost=data['system_cost'],
            daily_usage=data['daily_usage'],
            electricity_rate=data['electricity_rate'],
            annual_increase=data['annual_increase'],
        )
        return JsonResponse(result.to_dict())

    except PayloadError as e:
        return json_error(str(e), status=400)
    except Exception as e:
        logger.error(f"❌ ROI calculation failed: {e}", exc_info=True)
        return json_error("Failed to calculate ROI", status=500)
