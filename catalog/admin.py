# catalog/admin.py
"""
Django admin configuration for the reference catalog.
"""

from django.contrib import admin, messages

from weather.tasks import refresh_county_solar_data
from .models import Appliance, County, Installer


@admin.register(Appliance)
class ApplianceAdmin(admin.ModelAdmin):
    """Appliance catalog"""
    list_display = ['name', 'category', 'power', 'hourly_usage', 'daily_energy_kwh']
    list_filter = ['category']
    search_fields = ['name', 'description']
    ordering = ['category', 'name']

    def daily_energy_kwh(self, obj):
        """kWh per unit and per day at typical usage"""
        return round(obj.daily_energy_kwh, 2)
    daily_energy_kwh.short_description = 'kWh/day'


@admin.register(County)
class CountyAdmin(admin.ModelAdmin):
    """Counties and their solar resource"""
    list_display = ['name', 'irradiance', 'peak_sun_hours', 'latitude', 'longitude', 'nb_installers']
    search_fields = ['name']
    actions = ['refresh_pvgis_data']

    def nb_installers(self, obj):
        return obj.installers.count()
    nb_installers.short_description = 'Installers'

    @admin.action(description="Refresh PVGIS irradiance data")
    def refresh_pvgis_data(self, request, queryset):
        """Queues one PVGIS refresh task per selected county"""
        queued = 0
        for county in queryset:
            if not county.has_coordinates:
                continue
            refresh_county_solar_data.delay(county.id)
            queued += 1

        self.message_user(
            request,
            f"{queued} PVGIS refresh task(s) queued",
            messages.SUCCESS if queued else messages.WARNING,
        )


@admin.register(Installer)
class InstallerAdmin(admin.ModelAdmin):
    """Solar installers"""
    list_display = ['name', 'email', 'phone', 'verified', 'rating']
    list_filter = ['verified', 'counties']
    list_editable = ['verified']
    search_fields = ['name', 'email', 'address']
    filter_horizontal = ['counties']
