"""
WSGI config for the KGL Produce Trading project.

Exposes the WSGI callable as a module-level variable named ``application``.
The database connection is verified before the first request is served; a
failure terminates the process.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()

from apps.common.database import connect_database  # noqa: E402

connect_database()
