"""
Tests for the PVGIS client and county irradiance lookup
weather/tests/test_pvgis.py

PVGIS is never called: requests.Session is mocked.
"""

from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest
import requests
from django.utils import timezone

from weather.models import PVGISData
from weather.services import PVGISClient, get_county_solar_data
from weather.tasks import refresh_county_solar_data


def monthly_payload(h_m=180):
    return {
        'outputs': {
            'monthly': {
                'fixed': [{'month': month, 'H_m': h_m, 'E_m': 150} for month in range(1, 13)],
            },
        },
    }


def mock_session(payload=None, error=None):
    """Patches requests.Session in the pvgis module; returns the session mock."""
    response = MagicMock()
    response.json.return_value = payload
    if error is not None:
        response.raise_for_status.side_effect = error

    patcher = patch('weather.services.pvgis.requests.Session')
    session_cls = patcher.start()
    session_cls.return_value.get.return_value = response
    return patcher, session_cls.return_value


@pytest.fixture
def pvgis_ok():
    patcher, session = mock_session(monthly_payload())
    yield session
    patcher.stop()


class TestPVGISClient:
    """Raw client behaviour"""

    def test_seriescalc_parameters(self, pvgis_ok):
        PVGISClient(timeout=5).get_series_data(-1.28, 36.81)

        args, kwargs = pvgis_ok.get.call_args
        assert args[0] == 'https://re.jrc.ec.europa.eu/api/v5_2/seriescalc'
        assert kwargs['timeout'] == 5
        assert kwargs['params'] == {
            'lat': -1.28,
            'lon': 36.81,
            'outputformat': 'json',
            'startyear': 2020,
            'endyear': 2020,
            'pvcalculation': 1,
            'peakpower': 1,
            'loss': 14,
        }

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError, match="latitude"):
            PVGISClient().get_series_data(95, 36.8)

    def test_http_error_propagates(self):
        error = requests.exceptions.HTTPError(response=MagicMock(status_code=503))
        patcher, _ = mock_session(error=error)
        try:
            with pytest.raises(requests.exceptions.HTTPError):
                PVGISClient().get_series_data(-1.28, 36.81)
        finally:
            patcher.stop()

    def test_monthly_parsing(self):
        client = PVGISClient()
        df = client.parse_monthly_irradiation(monthly_payload(h_m=165))

        assert list(df['month']) == list(range(1, 13))
        assert df['irradiation'].iloc[0] == pytest.approx(5.5)

        summary = client.summarize(df)
        assert summary['irradiance'] == pytest.approx(5.5)
        assert summary['peak_sun_hours'] == summary['irradiance']
        assert summary['monthly_data'][0] == {'month': 1, 'irradiation': pytest.approx(5.5)}

    def test_hourly_parsing(self):
        # Two January days, 12 sunny hours at 500 W/m² → 6 kWh/m²/day
        hourly = [
            {'time': f'202001{day:02d}:{hour:02d}10', 'G(i)': 500 if 6 <= hour < 18 else 0}
            for day in (1, 2)
            for hour in range(24)
        ]
        df = PVGISClient().parse_monthly_irradiation({'outputs': {'hourly': hourly}})

        assert list(df['month']) == [1]
        assert df['irradiation'].iloc[0] == pytest.approx(6.0)

    def test_payload_without_data(self):
        with pytest.raises(ValueError):
            PVGISClient().parse_monthly_irradiation({'outputs': {}})


@pytest.mark.django_db
class TestCountySolarData:
    """Cache, live call and fallback order"""

    def test_disabled_uses_stored_values(self, nairobi, pvgis_ok):
        data = get_county_solar_data(nairobi)

        assert data == {'irradiance': 5.6, 'peak_sun_hours': 5.2, 'monthly_data': None, 'source': 'stored'}
        pvgis_ok.get.assert_not_called()

    def test_enabled_calls_api_and_caches(self, nairobi, pvgis_ok, settings):
        settings.SOLAR_PVGIS_ENABLED = True

        first = get_county_solar_data(nairobi)
        second = get_county_solar_data(nairobi)

        assert first['source'] == 'api'
        assert first['peak_sun_hours'] == pytest.approx(6.0)
        assert len(first['monthly_data']) == 12
        assert second['source'] == 'cache'
        assert pvgis_ok.get.call_count == 1

        cached = PVGISData.objects.get(county=nairobi)
        assert cached.expires_at > timezone.now() + timedelta(days=29)

    def test_failure_falls_back_to_stored_values(self, nairobi, settings):
        settings.SOLAR_PVGIS_ENABLED = True
        patcher, session = mock_session()
        session.get.side_effect = requests.exceptions.Timeout()
        try:
            data = get_county_solar_data(nairobi)
        finally:
            patcher.stop()

        assert data['source'] == 'stored'
        assert data['peak_sun_hours'] == 5.2
        assert not PVGISData.objects.exists()

    def test_malformed_payload_falls_back(self, nairobi, settings):
        settings.SOLAR_PVGIS_ENABLED = True
        patcher, _ = mock_session({'outputs': {'monthly': {}}})
        try:
            data = get_county_solar_data(nairobi)
        finally:
            patcher.stop()

        assert data['source'] == 'stored'

    def test_county_without_coordinates(self, county_without_coordinates, pvgis_ok, settings):
        settings.SOLAR_PVGIS_ENABLED = True

        data = get_county_solar_data(county_without_coordinates)

        assert data['peak_sun_hours'] == 5.4
        pvgis_ok.get.assert_not_called()

    def test_expired_cache_ignored(self, nairobi):
        PVGISData.objects.create(
            county=nairobi, raw_data='{}', irradiance=6.5, peak_sun_hours=6.5,
            expires_at=timezone.now() - timedelta(days=1),
        )

        assert get_county_solar_data(nairobi)['peak_sun_hours'] == 5.2

    def test_invalidated_cache_ignored(self, nairobi):
        PVGISData.objects.create(
            county=nairobi, raw_data='{}', irradiance=6.5, peak_sun_hours=6.5, is_valid=False,
        )

        assert get_county_solar_data(nairobi)['source'] == 'stored'


@pytest.mark.django_db
class TestRefreshTask:
    """Celery task refreshing a county's cache"""

    def test_refresh_replaces_cache(self, nairobi, pvgis_ok):
        PVGISData.objects.create(county=nairobi, raw_data='{}', irradiance=4.0, peak_sun_hours=4.0)

        result = refresh_county_solar_data(nairobi.id)

        assert result['county_id'] == nairobi.id
        assert result['peak_sun_hours'] == pytest.approx(6.0)
        assert PVGISData.objects.get(county=nairobi).peak_sun_hours == pytest.approx(6.0)

    def test_unknown_county(self, db):
        assert refresh_county_solar_data(404) is None

    def test_county_without_coordinates(self, county_without_coordinates):
        with pytest.raises(ValueError):
            refresh_county_solar_data(county_without_coordinates.id)
