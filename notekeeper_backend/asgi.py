"""
ASGI config for notekeeper_backend.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notekeeper_backend.settings")

application = get_asgi_application()
