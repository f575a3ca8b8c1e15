"""
Tests for the calculation endpoints
solar_calc/tests/test_views.py
"""

import pytest


@pytest.mark.django_db
class TestCalculateEnergy:
    """POST /api/calculate/energy"""

    url = '/api/calculate/energy'

    def test_from_appliances(self, client, nairobi, led_bulb, refrigerator):
        response = client.post(self.url, {
            'appliances': [
                {'id': led_bulb.id, 'quantity': 2, 'hoursPerDay': 5},
                {'id': refrigerator.id, 'quantity': 1, 'hoursPerDay': 24},
            ],
            'countyId': nairobi.id,
        }, content_type='application/json')

        assert response.status_code == 200
        body = response.json()
        assert body['dailyUsage'] == pytest.approx(3.7)
        assert body['monthlyUsage'] == pytest.approx(111)
        assert body['annualUsage'] == pytest.approx(1350.5)
        assert body['monthlyBill'] == pytest.approx(2775)

    def test_typical_hours_when_omitted(self, client, nairobi, refrigerator):
        response = client.post(self.url, {
            'appliances': [{'id': refrigerator.id, 'quantity': 1}],
            'countyId': nairobi.id,
        }, content_type='application/json')

        assert response.json()['dailyUsage'] == pytest.approx(3.6)

    def test_from_bill(self, client, nairobi):
        response = client.post(self.url, {'billAmount': 5000, 'countyId': nairobi.id},
                               content_type='application/json')

        body = response.json()
        assert body['dailyUsage'] == pytest.approx(6.6667, abs=1e-4)
        assert body['monthlyBill'] == pytest.approx(5000)

    def test_appliances_win_over_bill(self, client, nairobi, led_bulb):
        response = client.post(self.url, {
            'appliances': [{'id': led_bulb.id, 'quantity': 1, 'hoursPerDay': 10}],
            'billAmount': 5000,
            'countyId': nairobi.id,
        }, content_type='application/json')

        assert response.json()['dailyUsage'] == pytest.approx(0.1)

    def test_missing_usage_source(self, client, nairobi):
        response = client.post(self.url, {'countyId': nairobi.id}, content_type='application/json')

        assert response.status_code == 400
        assert response.json()['message'] == "Either appliances or billAmount must be provided"

    def test_boolean_bill_rejected(self, client, nairobi):
        response = client.post(self.url, {'billAmount': True, 'countyId': nairobi.id},
                               content_type='application/json')

        assert response.status_code == 400
        assert 'bill_amount' in response.json()['errors']

    def test_missing_county(self, client, db):
        response = client.post(self.url, {'billAmount': 5000}, content_type='application/json')

        assert response.status_code == 400
        assert 'county_id' in response.json()['errors']

    def test_unknown_county(self, client, db):
        response = client.post(self.url, {'billAmount': 5000, 'countyId': 999},
                               content_type='application/json')

        assert response.status_code == 404
        assert response.json()['message'] == "County not found"

    def test_unknown_appliance(self, client, nairobi):
        response = client.post(self.url, {
            'appliances': [{'id': 12345, 'quantity': 1}],
            'countyId': nairobi.id,
        }, content_type='application/json')

        assert response.status_code == 404
        assert response.json()['message'] == "Appliance not found: 12345"

    def test_invalid_json(self, client, db):
        response = client.post(self.url, '{oops', content_type='application/json')

        assert response.status_code == 400
        assert response.json()['message'].startswith("Invalid JSON body")

    def test_get_not_allowed(self, client, db):
        assert client.get(self.url).status_code == 405


@pytest.mark.django_db
class TestCalculateSystem:
    """POST /api/calculate/system"""

    url = '/api/calculate/system'

    def test_reference_case(self, client, nairobi):
        response = client.post(self.url, {
            'dailyUsage': 10,
            'countyId': nairobi.id,
            'includeStorage': False,
        }, content_type='application/json')

        assert response.status_code == 200
        assert response.json() == {
            'systemSize': 2.6,
            'panelCount': 7,
            'inverterSize': 4,
            'batterySize': 0,
            'dailyProduction': pytest.approx(10.816),
            'minCost': 280800,
            'maxCost': 374400,
            'averageCost': 327600,
        }

    def test_with_storage(self, client, nairobi):
        response = client.post(self.url, {
            'dailyUsage': 10,
            'countyId': nairobi.id,
            'includeStorage': True,
        }, content_type='application/json')

        body = response.json()
        assert body['batterySize'] == 15
        assert body['averageCost'] == 546000

    def test_roof_area_accepted(self, client, nairobi):
        response = client.post(self.url, {
            'dailyUsage': 10,
            'countyId': nairobi.id,
            'roofArea': 40,
        }, content_type='application/json')

        assert response.status_code == 200
        assert response.json()['systemSize'] == 2.6

    def test_sunnier_county_needs_smaller_system(self, client, nairobi):
        from catalog.models import County
        turkana = County.objects.create(name='Turkana', irradiance=6.4, peak_sun_hours=6.1)

        def size(county):
            return client.post(self.url, {'dailyUsage': 20, 'countyId': county.id},
                               content_type='application/json').json()['systemSize']

        assert size(turkana) < size(nairobi)

    def test_non_positive_usage(self, client, nairobi):
        response = client.post(self.url, {'dailyUsage': 0, 'countyId': nairobi.id},
                               content_type='application/json')

        assert response.status_code == 400
        assert 'daily_usage' in response.json()['errors']

    def test_oversized_usage_rejected(self, client, nairobi):
        response = client.post(self.url, {'dailyUsage': 1e308, 'countyId': nairobi.id, 'includeStorage': True},
                               content_type='application/json')

        assert response.status_code == 400
        assert 'daily_usage' in response.json()['errors']

    def test_unknown_county(self, client, db):
        response = client.post(self.url, {'dailyUsage': 10, 'countyId': 77},
                               content_type='application/json')
        assert response.status_code == 404


@pytest.mark.django_db
class TestCalculateROI:
    """POST /api/calculate/roi"""

    url = '/api/calculate/roi'

    def _payload(self, county, **overrides):
        payload = {
            'systemSize': 5,
            'systemCost': 600000,
            'dailyUsage': 10,
            'electricityRate': 25,
            'countyId': county.id,
            'annualIncrease': 5,
        }
        payload.update(overrides)
        return payload

    def test_projection(self, client, nairobi):
        response = client.post(self.url, self._payload(nairobi), content_type='application/json')

        assert response.status_code == 200
        body = response.json()
        assert len(body['yearByYearAnalysis']) == 25
        assert body['yearByYearAnalysis'][0] == {
            'year': 1,
            'gridCost': pytest.approx(90000),
            'solarCost': pytest.approx(610000),
            'cumulativeSavings': pytest.approx(-520000),
        }
        assert body['paybackPeriod'] == pytest.approx(6.4324, abs=1e-4)
        assert body['twentyYearSavings'] == pytest.approx(
            body['yearByYearAnalysis'][19]['cumulativeSavings']
        )

    def test_annual_increase_defaults_to_5(self, client, nairobi):
        payload = self._payload(nairobi)
        del payload['annualIncrease']

        body = client.post(self.url, payload, content_type='application/json').json()

        assert body['yearByYearAnalysis'][1]['gridCost'] == pytest.approx(94500)

    def test_missing_field(self, client, nairobi):
        payload = self._payload(nairobi)
        del payload['systemCost']

        response = client.post(self.url, payload, content_type='application/json')

        assert response.status_code == 400
        assert 'system_cost' in response.json()['errors']

    def test_runaway_annual_increase_rejected(self, client, nairobi):
        response = client.post(self.url, self._payload(nairobi, annualIncrease=1e20),
                               content_type='application/json')

        assert response.status_code == 400
        assert 'annual_increase' in response.json()['errors']

    def test_unknown_county(self, client, nairobi):
        response = client.post(self.url, self._payload(nairobi, countyId=999),
                               content_type='application/json')
        assert response.status_code == 404
