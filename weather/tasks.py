import logging

from celery import shared_task

from catalog.models import County
from weather.services.pvgis import fetch_county_solar_data

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=2, default_retry_delay=60)
def refresh_county_solar_data(self, county_id):
    """Refreshes the PVGIS cache of one county, bypassing the current row."""
    try:
        county = County.objects.get(id=county_id)
    except County.DoesNotExist:
        logger.error(f"❌ County {county_id} not found, PVGIS refresh skipped")
        return None

    try:
        summary = fetch_county_solar_data(county, use_cache=False)
    except ValueError as e:
        # Bad coordinates or unusable payload: retrying will not help
        logger.error(f"❌ PVGIS refresh failed for {county.name}: {e}")
        raise
    except Exception as e:
        logger.warning(f"⚠️ PVGIS refresh for {county.name} failed, retrying: {e}")
        raise self.retry(exc=e)

    logger.info(f"✅ PVGIS refresh done for {county.name}: {summary['peak_sun_hours']:.2f} PSH")
    return {
        'county_id': county.id,
        'irradiance': summary['irradiance'],
        'peak_sun_hours': summary['peak_sun_hours'],
    }
