"""
PVGIS client used to refine county irradiance.

API documentation: https://joint-research-centre.ec.europa.eu/pvgis-tools/api_en
"""

import json
import logging
from datetime import timedelta
from typing import Dict, Optional

import pandas as pd
import requests
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)


class PVGISClient:
    """
    Client for the PVGIS 5.2 API (Photovoltaic Geographical Information System).

    PVGIS is a free service of the European Commission's Joint Research
    Centre covering Europe, Africa and Asia. Only the seriescalc endpoint
    is used here, for a 1 kWp reference system.
    """

    BASE_URL = "https://re.jrc.ec.europa.eu/api/v5_2"

    # Year of radiation data requested
    REFERENCE_YEAR = 2020

    # Reference system: 1 kWp with 14% system losses
    PEAK_POWER_KWP = 1
    SYSTEM_LOSS_PERCENT = 14

    def __init__(self, timeout: int = 10):
        """
        Args:
            timeout: HTTP timeout in seconds
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'KenyaSolarEstimator/1.0 (Python; PVGIS Client)'
        })

    def get_series_data(self, latitude: float, longitude: float) -> Dict:
        """
        Calls seriescalc for a location.

        Raises:
            requests.RequestException: Network or HTTP error
            ValueError: Invalid coordinates or non-JSON response
        """
        if not -90 <= latitude <= 90:
            raise ValueError(f"Invalid latitude: {latitude} (must be between -90 and 90)")
        if not -180 <= longitude <= 180:
            raise ValueError(f"Invalid longitude: {longitude} (must be between -180 and 180)")

        params = {
            'lat': latitude,
            'lon': longitude,
            'outputformat': 'json',
            'startyear': self.REFERENCE_YEAR,
            'endyear': self.REFERENCE_YEAR,
            'pvcalculation': 1,
            'peakpower': self.PEAK_POWER_KWP,
            'loss': self.SYSTEM_LOSS_PERCENT,
        }
        url = f"{self.BASE_URL}/seriescalc"

        logger.info(f"🌐 PVGIS seriescalc call for {latitude}, {longitude}")
        logger.debug(f"Parameters: {params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout:
            logger.error(f"PVGIS timeout (>{self.timeout}s)")
            raise
        except requests.exceptions.HTTPError as e:
            logger.error(f"PVGIS HTTP error {e.response.status_code}: {e}")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"PVGIS JSON parsing error: {e}")
            raise ValueError("Invalid PVGIS response (not JSON)")
        except requests.exceptions.RequestException as e:
            logger.error(f"PVGIS call failed: {e}")
            raise

    def parse_monthly_irradiation(self, data: Dict) -> pd.DataFrame:
        """
        Average daily irradiation (kWh/m²/day) for each month.

        Uses the monthly block (H_m, kWh/m²/month, spread over 30 days) when
        present, otherwise aggregates the hourly plane irradiance G(i).

        Returns:
            pd.DataFrame: columns month, irradiation (12 rows at most)
        """
        outputs = data.get('outputs') or {}

        monthly = (outputs.get('monthly') or {}).get('fixed')
        if monthly:
            df = pd.DataFrame(monthly)
            if 'H_m' not in df.columns:
                raise ValueError("No H_m column in PVGIS monthly data")
            df['irradiation'] = df['H_m'] / 30
            return df[['month', 'irradiation']].sort_values('month').reset_index(drop=True)

        hourly = outputs.get('hourly')
        if not hourly:
            logger.error(f"Available keys: {list(outputs.keys())}")
            raise ValueError("No monthly or hourly data in PVGIS response")

        df = pd.DataFrame(hourly)
        if 'G(i)' not in df.columns or 'time' not in df.columns:
            raise ValueError("Hourly PVGIS data lacks time or G(i) columns")

        # Format: '20200101:0010'
        df['timestamp'] = pd.to_datetime(df['time'], format='%Y%m%d:%H%M', errors='coerce')
        df = df.dropna(subset=['timestamp'])
        df['month'] = df['timestamp'].dt.month
        df['day'] = df['timestamp'].dt.date

        # W/m² over one hour → Wh/m²
        grouped = df.groupby('month').agg(total_wh=('G(i)', 'sum'), days=('day', 'nunique'))
        grouped['irradiation'] = grouped['total_wh'] / 1000 / grouped['days']

        return grouped.reset_index()[['month', 'irradiation']]

    def summarize(self, monthly_df: pd.DataFrame) -> Dict:
        """
        Annual average and monthly breakdown.

        Peak sun hours equal the daily irradiation in kWh/m² (1 kW/m² reference).
        """
        if monthly_df.empty:
            raise ValueError("Empty PVGIS monthly data")

        irradiance = float(monthly_df['irradiation'].mean())
        monthly_data = [
            {'month': int(row.month), 'irradiation': float(row.irradiation)}
            for row in monthly_df.itertuples(index=False)
        ]

        return {
            'irradiance': irradiance,
            'peak_sun_hours': irradiance,
            'monthly_data': monthly_data,
        }


def stored_solar_data(county) -> Dict:
    """County values from the catalog, without monthly breakdown."""
    return {
        'irradiance': county.irradiance,
        'peak_sun_hours': county.peak_sun_hours,
        'monthly_data': None,
        'source': 'stored',
    }


def fetch_county_solar_data(
    county,
    use_cache: bool = True,
    cache_days: Optional[int] = None
) -> Dict:
    """
    PVGIS irradiance for a county, through the PVGISData cache.

    Raises on network or parsing errors; callers decide on the fallback.

    Args:
        county: catalog County with coordinates
        use_cache: Return a fresh cached row when there is one
        cache_days: Cache lifetime (defaults to SOLAR_PVGIS_CACHE_DAYS)
    """
    from ..models import PVGISData

    if not county.has_coordinates:
        raise ValueError(f"County {county.name} has no coordinates")

    if use_cache:
        cached = PVGISData.objects.filter(county=county).first()
        if cached and cached.is_fresh:
            logger.info(f"✅ PVGIS data found in cache for {county.name}")
            return cached.to_solar_data()

    client = PVGISClient(timeout=settings.SOLAR_PVGIS_TIMEOUT)
    data = client.get_series_data(county.latitude, county.longitude)
    summary = client.summarize(client.parse_monthly_irradiation(data))

    if cache_days is None:
        cache_days = settings.SOLAR_PVGIS_CACHE_DAYS
    expires_at = timezone.now() + timedelta(days=cache_days)

    PVGISData.objects.update_or_create(
        county=county,
        defaults={
            'raw_data': json.dumps(data),
            'irradiance': summary['irradiance'],
            'peak_sun_hours': summary['peak_sun_hours'],
            'monthly_data': summary['monthly_data'],
            'is_valid': True,
            'expires_at': expires_at,
        },
    )

    logger.info(
        f"💾 PVGIS data cached for {county.name}: {summary['irradiance']:.2f} kWh/m²/day "
        f"(expires {expires_at.strftime('%Y-%m-%d')})"
    )

    summary['source'] = 'api'
    return summary


def get_county_solar_data(county) -> Dict:
    """
    Irradiance and peak sun hours to use for a county.

    Order: fresh PVGIS cache, live PVGIS call (only when SOLAR_PVGIS_ENABLED
    and the county has coordinates), then the stored catalog values. Never
    raises because of PVGIS.

    Returns:
        dict: irradiance, peak_sun_hours, monthly_data (list or None), source
    """
    from ..models import PVGISData

    cached = PVGISData.objects.filter(county=county).first()
    if cached and cached.is_fresh:
        return cached.to_solar_data()

    if not settings.SOLAR_PVGIS_ENABLED or not county.has_coordinates:
        return stored_solar_data(county)

    try:
        return fetch_county_solar_data(county, use_cache=False)
    except Exception as e:
        logger.warning(f"⚠️ PVGIS unavailable for {county.name}, using stored values: {e}")
        return stored_solar_data(county)
