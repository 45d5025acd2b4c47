"""
WSGI config for splitLedger.

Named export for Gunicorn: config.wsgi:splitLedger
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

splitLedger = get_wsgi_application()
