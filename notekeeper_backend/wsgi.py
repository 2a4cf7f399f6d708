"""
WSGI config for notekeeper_backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notekeeper_backend.settings")

application = get_wsgi_application()
