from django.urls import path

from . import views

app_name = 'projects'

urlpatterns = [
    path('projects', views.project_collection, name='project_collection'),
    path('projects/<int:project_id>', views.project_detail, name='project_detail'),
]
