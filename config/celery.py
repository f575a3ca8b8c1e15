# config/celery.py
"""
Celery configuration for the solar estimator.

Background work is limited to refreshing the PVGIS irradiance cache;
the calculation endpoints never wait on a task.
"""

import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('solar_estimator')

# Every Celery setting lives in config/settings.py with a CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Picks up tasks.py in every installed app
app.autodiscover_tasks()
