"""
URLs for the reference catalog (appliances, counties, installers).
"""

# catalog/urls.py
from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    # Appliances
    path('appliances', views.appliance_list, name='appliance_list'),
    path('appliances/<int:appliance_id>', views.appliance_detail, name='appliance_detail'),

    # Counties
    path('counties', views.county_list, name='county_list'),
    path('counties/<int:county_id>', views.county_detail, name='county_detail'),
    path('counties/<int:county_id>/installers', views.county_installers, name='county_installers'),

    # Installers
    path('installers', views.installer_list, name='installer_list'),
    path('installers/<int:installer_id>', views.installer_detail, name='installer_detail'),
]
