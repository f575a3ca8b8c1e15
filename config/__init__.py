# config/__init__.py
"""
Makes config a Python package and loads the Celery application
so that it is available as soon as Django starts.
"""

from .celery import app as celery_app

__all__ = ('celery_app',)
