"""
Cache of PVGIS irradiance lookups, one row per county.
"""

from django.db import models
from django.utils import timezone


class PVGISData(models.Model):
    """
    Irradiance derived from a PVGIS seriescalc call.
    Avoids calling the API for every county detail or sizing request.
    """
    county = models.OneToOneField(
        'catalog.County',
        on_delete=models.CASCADE,
        related_name='pvgis_data'
    )

    # Raw payload (JSON)
    raw_data = models.TextField(verbose_name="Raw JSON payload")

    # Derived figures
    irradiance = models.FloatField(verbose_name="Average daily irradiation (kWh/m²/day)")
    peak_sun_hours = models.FloatField(verbose_name="Peak sun hours (h/day)")
    monthly_data = models.JSONField(default=list, verbose_name="Monthly daily irradiation")

    # Cache
    is_valid = models.BooleanField(default=True, verbose_name="Cache valid")
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField(null=True, blank=True, verbose_name="Cache expiry")

    class Meta:
        verbose_name = "PVGIS data"
        verbose_name_plural = "PVGIS data"
        ordering = ['-created_at']

    def __str__(self):
        return f"PVGIS - {self.county} ({self.irradiance:.2f} kWh/m²/day)"

    @property
    def is_fresh(self):
        """Valid and not expired"""
        if not self.is_valid:
            return False
        return self.expires_at is None or self.expires_at > timezone.now()

    def to_solar_data(self):
        return {
            'irradiance': self.irradiance,
            'peak_sun_hours': self.peak_sun_hours,
            'monthly_data': self.monthly_data,
            'source': 'cache',
        }
