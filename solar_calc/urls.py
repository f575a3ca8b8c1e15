"""
URLs for the calculation engine.
"""

# solar_calc/urls.py
from django.urls import path
from . import views

app_name = 'solar_calc'

urlpatterns = [
    path('energy', views.calculate_energy, name='calculate_energy'),
    path('system', views.calculate_system, name='calculate_system'),
    path('roi', views.calculate_roi_view, name='calculate_roi'),
]
