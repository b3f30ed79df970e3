"""
runserver with the project's defaults.

    python manage.py runserver          # listens on settings.PORT
    python manage.py runserver 8080     # explicit port still wins

The database connection is checked before serving.
"""
from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunserverCommand

from apps.common.database import connect_database


class Command(StaticfilesRunserverCommand):
    help = 'Starts the API development server on the configured PORT'

    default_port = str(settings.PORT)

    def inner_run(self, *args, **options):
        connect_database()
        super().inner_run(*args, **options)
