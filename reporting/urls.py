"""
URLs for the reporting module.
"""

from django.urls import path

from . import views

app_name = 'reporting'

urlpatterns = [
    path('projects/<int:project_id>/report', views.project_report, name='project_report'),
    path('projects/<int:project_id>/report.pdf', views.project_report_pdf, name='project_report_pdf'),
]
