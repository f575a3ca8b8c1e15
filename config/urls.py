"""
Main URL configuration for the solar estimator.

Every JSON endpoint lives under /api/ (no trailing slash):
    /api/appliances, /api/counties, /api/installers  → reference catalog
    /api/calculate/energy|system|roi                  → calculation engine
    /api/projects, /api/projects/<id>/report          → saved projects and reports
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse

urlpatterns = [
    path('admin/', admin.site.urls),

    path('api/', include('catalog.urls', namespace='catalog')),
    path('api/calculate/', include('solar_calc.urls', namespace='solar_calc')),
    path('api/', include('projects.urls', namespace='projects')),
    path('api/', include('reporting.urls', namespace='reporting')),

    # Health check for monitoring
    path('health/', lambda r: JsonResponse({'status': 'ok'})),
]
