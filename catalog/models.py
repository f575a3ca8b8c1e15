# catalog/models.py
"""
Reference catalog: appliances, Kenyan counties and solar installers.

These rows are static data seeded by the seed_catalog command and only
read by the calculation endpoints.
"""

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator

from core.validators import (
    validate_hours_per_day,
    validate_non_negative,
    validate_peak_sun_hours,
    validate_rating,
)


class Appliance(models.Model):
    """An electrical appliance with its rated power and typical daily use"""

    CATEGORY_CHOICES = [
        ('residential', 'Residential'),
        ('commercial', 'Commercial'),
        ('industrial', 'Industrial'),
    ]

    # Explicit icon set shown by the client; no free-form component names
    ICON_CHOICES = [
        ('lightbulb', 'Light bulb'),
        ('fan', 'Fan'),
        ('refrigerator', 'Refrigerator'),
        ('tv', 'Television'),
        ('laptop', 'Laptop'),
        ('air-conditioner', 'Air conditioner'),
        ('computer', 'Computer'),
        ('printer', 'Printer'),
        ('tool', 'Tool'),
        ('zap', 'Generic electrical load'),
    ]

    name = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    power = models.PositiveIntegerField(help_text="Rated power in watts")
    hourly_usage = models.FloatField(
        validators=[validate_hours_per_day],
        help_text="Typical hours of use per day"
    )
    icon_name = models.CharField(max_length=30, choices=ICON_CHOICES, blank=True, default='')
    description = models.TextField(blank=True, default='')

    class Meta:
        ordering = ['category', 'name']

    def __str__(self):
        return f"{self.name} ({self.power} W)"

    @property
    def daily_energy_kwh(self):
        """Energy used by one unit over its typical day (kWh)"""
        return self.power * self.hourly_usage / 1000

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'power': self.power,
            'hourlyUsage': self.hourly_usage,
            'iconName': self.icon_name or None,
            'description': self.description or None,
        }


class County(models.Model):
    """A Kenyan county with its average solar resource"""

    name = models.CharField(max_length=100, unique=True)
    irradiance = models.FloatField(
        validators=[validate_non_negative],
        help_text="Average solar irradiance (kWh/m²/day)"
    )
    peak_sun_hours = models.FloatField(
        validators=[validate_peak_sun_hours],
        help_text="Average peak sun hours per day"
    )

    # Coordinates used for PVGIS lookups (optional)
    latitude = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-90), MaxValueValidator(90)]
    )
    longitude = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-180), MaxValueValidator(180)]
    )

    class Meta:
        verbose_name_plural = "Counties"
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def has_coordinates(self):
        return self.latitude is not None and self.longitude is not None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'irradiance': self.irradiance,
            'peakSunHours': self.peak_sun_hours,
        }


class Installer(models.Model):
    """A solar installer and the counties it operates in"""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    email = models.EmailField()
    phone = models.CharField(max_length=30)
    website = models.URLField(blank=True, default='')
    address = models.CharField(max_length=255, blank=True, default='')
    counties = models.ManyToManyField(County, related_name='installers', blank=True)
    verified = models.BooleanField(default=False)
    rating = models.FloatField(null=True, blank=True, validators=[validate_rating])

    # ["Residential", "Commercial", "Maintenance"]
    services = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ['-verified', 'name']

    def __str__(self):
        badge = "✓ " if self.verified else ""
        return f"{badge}{self.name}"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description or None,
            'email': self.email,
            'phone': self.phone,
            'website': self.website or None,
            'address': self.address or None,
            'countyIds': sorted(county.id for county in self.counties.all()),
            'verified': self.verified,
            'rating': self.rating,
            'services': self.services,
        }
