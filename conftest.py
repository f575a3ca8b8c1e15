"""
Shared pytest fixtures: a small reference catalog.
"""

import pytest

from catalog.models import Appliance, County, Installer


@pytest.fixture(autouse=True)
def pvgis_disabled(settings):
    """No live PVGIS calls unless a test enables them."""
    settings.SOLAR_PVGIS_ENABLED = False


@pytest.fixture
def nairobi(db):
    return County.objects.create(
        name='Nairobi',
        irradiance=5.6,
        peak_sun_hours=5.2,
        latitude=-1.286389,
        longitude=36.817223,
    )


@pytest.fixture
def county_without_coordinates(db):
    return County.objects.create(name='Lamu', irradiance=5.9, peak_sun_hours=5.4)


@pytest.fixture
def led_bulb(db):
    return Appliance.objects.create(
        name='LED Light Bulb', category='residential', power=10, hourly_usage=5, icon_name='lightbulb',
    )


@pytest.fixture
def refrigerator(db):
    return Appliance.objects.create(
        name='Refrigerator', category='residential', power=150, hourly_usage=24, icon_name='refrigerator',
    )


@pytest.fixture
def photocopier(db):
    return Appliance.objects.create(
        name='Photocopier', category='commercial', power=1100, hourly_usage=2, icon_name='printer',
    )


@pytest.fixture
def installer(nairobi):
    installer = Installer.objects.create(
        name='SunPower Kenya',
        email='info@sunpowerkenya.com',
        phone='+254722111222',
        verified=True,
        rating=4.8,
        services=['Residential', 'Maintenance'],
    )
    installer.counties.add(nairobi)
    return installer
