# projects/models.py
"""
Saved estimates: a snapshot of one calculation run for a county.
"""

from django.conf import settings
from django.db import models

from core.http import camel_case_keys
from core.validators import validate_non_negative, validate_positive


class Project(models.Model):
    """
    Snapshot of a completed estimate.

    Figures are stored as computed at save time; they are not recalculated
    when catalog constants change.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='solar_projects'
    )
    county = models.ForeignKey(
        'catalog.County',
        on_delete=models.PROTECT,
        related_name='projects'
    )

    # Consumption
    daily_usage = models.FloatField(validators=[validate_positive], help_text="kWh/day")
    monthly_usage = models.FloatField(validators=[validate_positive], help_text="kWh/month")

    # System and economics
    system_size = models.FloatField(validators=[validate_positive], help_text="kWp")
    estimated_cost = models.FloatField(validators=[validate_positive], help_text="KSh")
    monthly_savings = models.FloatField(help_text="KSh/month")
    payback_period = models.FloatField(validators=[validate_non_negative], help_text="Years")

    # Selected appliances with usage, as sent by the client
    appliances = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Project #{self.pk} - {self.county} ({self.system_size} kWp)"

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'countyId': self.county_id,
            'dailyUsage': self.daily_usage,
            'monthlyUsage': self.monthly_usage,
            'systemSize': self.system_size,
            'estimatedCost': self.estimated_cost,
            'monthlySavings': self.monthly_savings,
            'paybackPeriod': self.payback_period,
            'appliances': camel_case_keys(self.appliances),
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
