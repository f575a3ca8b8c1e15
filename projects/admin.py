"""
Django admin for saved projects.
"""

from django.contrib import admin

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Saved estimates (read-only snapshots)"""
    list_display = ['id', 'county', 'user', 'system_size', 'estimated_cost', 'payback_period', 'created_at']
    list_filter = ['county', 'created_at']
    search_fields = ['county__name', 'user__username']
    date_hierarchy = 'created_at'
    readonly_fields = [
        'user', 'county', 'daily_usage', 'monthly_usage', 'system_size',
        'estimated_cost', 'monthly_savings', 'payback_period', 'appliances', 'created_at',
    ]

    def has_add_permission(self, request):
        return False
