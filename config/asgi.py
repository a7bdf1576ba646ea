"""ASGI entry point for the SpotBnB API.

The API is synchronous; this module exists so the project can be served
by ASGI servers (uvicorn, daphne) without a separate configuration.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
