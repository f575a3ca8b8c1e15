"""
Django admin for the PVGIS cache.
"""

from django.contrib import admin

from .models import PVGISData


@admin.register(PVGISData)
class PVGISDataAdmin(admin.ModelAdmin):
    """Cached PVGIS lookups"""
    list_display = ['county', 'irradiance', 'peak_sun_hours', 'is_valid', 'created_at', 'expires_at']
    list_filter = ['is_valid', 'created_at']
    search_fields = ['county__name']
    readonly_fields = ['created_at']
    actions = ['invalidate']

    fieldsets = (
        ('County', {
            'fields': ('county',)
        }),
        ('Irradiance', {
            'fields': ('irradiance', 'peak_sun_hours', 'monthly_data')
        }),
        ('Cache', {
            'fields': ('is_valid', 'expires_at')
        }),
        ('Raw data', {
            'fields': ('raw_data',),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    @admin.action(description="Invalidate selected cache entries")
    def invalidate(self, request, queryset):
        updated = queryset.update(is_valid=False)
        self.message_user(request, f"{updated} cache entr{'y' if updated == 1 else 'ies'} invalidated")
