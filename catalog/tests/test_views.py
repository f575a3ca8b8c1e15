"""
Tests for the catalog endpoints
catalog/tests/test_views.py
"""

import pytest

from catalog.models import Installer
from weather.models import PVGISData


@pytest.mark.django_db
class TestApplianceEndpoints:
    """GET /api/appliances"""

    def test_list_returns_camel_case(self, client, led_bulb):
        response = client.get('/api/appliances')

        assert response.status_code == 200
        body = response.json()
        assert body == [{
            'id': led_bulb.id,
            'name': 'LED Light Bulb',
            'category': 'residential',
            'power': 10,
            'hourlyUsage': 5,
            'iconName': 'lightbulb',
            'description': None,
        }]

    def test_category_filter(self, client, led_bulb, refrigerator, photocopier):
        response = client.get('/api/appliances', {'category': 'commercial'})

        names = [item['name'] for item in response.json()]
        assert names == ['Photocopier']

    def test_residential_sorted_by_name(self, client, led_bulb, refrigerator):
        response = client.get('/api/appliances', {'category': 'residential'})

        names = [item['name'] for item in response.json()]
        assert names == ['LED Light Bulb', 'Refrigerator']

    def test_detail(self, client, refrigerator):
        response = client.get(f'/api/appliances/{refrigerator.id}')

        assert response.status_code == 200
        assert response.json()['power'] == 150

    def test_detail_not_found(self, client, db):
        response = client.get('/api/appliances/999')

        assert response.status_code == 404
        assert response.json() == {'message': 'Appliance not found'}

    def test_post_not_allowed(self, client, db):
        response = client.post('/api/appliances', {}, content_type='application/json')
        assert response.status_code == 405


@pytest.mark.django_db
class TestCountyEndpoints:
    """GET /api/counties"""

    def test_list(self, client, nairobi, county_without_coordinates):
        response = client.get('/api/counties')

        names = [county['name'] for county in response.json()]
        assert names == ['Lamu', 'Nairobi']

    def test_detail_uses_stored_values(self, client, nairobi):
        response = client.get(f'/api/counties/{nairobi.id}')

        body = response.json()
        assert body['name'] == 'Nairobi'
        assert body['peakSunHours'] == 5.2
        assert body['irradiance'] == 5.6
        assert body['monthlyData'] is None

    def test_detail_uses_fresh_pvgis_cache(self, client, nairobi):
        PVGISData.objects.create(
            county=nairobi,
            raw_data='{}',
            irradiance=5.9,
            peak_sun_hours=5.9,
            monthly_data=[{'month': 1, 'irradiation': 6.1}],
        )

        body = client.get(f'/api/counties/{nairobi.id}').json()

        assert body['peakSunHours'] == 5.9
        assert body['monthlyData'] == [{'month': 1, 'irradiation': 6.1}]

    def test_detail_not_found(self, client, db):
        response = client.get('/api/counties/42')

        assert response.status_code == 404
        assert response.json()['message'] == 'County not found'

    def test_county_installers(self, client, installer, nairobi, county_without_coordinates):
        response = client.get(f'/api/counties/{nairobi.id}/installers')
        assert [item['name'] for item in response.json()] == ['SunPower Kenya']

        response = client.get(f'/api/counties/{county_without_coordinates.id}/installers')
        assert response.json() == []

    def test_county_installers_unknown_county(self, client, db):
        assert client.get('/api/counties/42/installers').status_code == 404


@pytest.mark.django_db
class TestInstallerEndpoints:
    """GET /api/installers"""

    def test_list_verified_first(self, client, installer, nairobi):
        Installer.objects.create(
            name='Acme Solar', email='a@acme.co.ke', phone='+254700000000', verified=False,
        )

        names = [item['name'] for item in client.get('/api/installers').json()]
        assert names == ['SunPower Kenya', 'Acme Solar']

    def test_filter_by_county(self, client, installer, nairobi, county_without_coordinates):
        response = client.get('/api/installers', {'countyId': county_without_coordinates.id})
        assert response.json() == []

        response = client.get('/api/installers', {'countyId': nairobi.id})
        assert response.json()[0]['countyIds'] == [nairobi.id]

    def test_non_numeric_county_filter_ignored(self, client, installer):
        response = client.get('/api/installers', {'countyId': 'abc'})
        assert len(response.json()) == 1

    def test_detail(self, client, installer):
        body = client.get(f'/api/installers/{installer.id}').json()

        assert body['rating'] == 4.8
        assert body['services'] == ['Residential', 'Maintenance']
        assert body['verified'] is True

    def test_detail_not_found(self, client, db):
        assert client.get('/api/installers/7').status_code == 404
