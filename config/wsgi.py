"""WSGI entry point for the SpotBnB API.

Used by ``runserver`` and by production WSGI servers such as gunicorn
(``gunicorn config.wsgi``). Production deployments export
``DJANGO_SETTINGS_MODULE=config.settings.prod``.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
