#!/usr/bin/env python
"""
Entry point for the medication tracker project.  Sets the default settings
module to ``medtrack.settings`` and delegates to Django's management command
line utility.  ``runserver`` listens on ``PORT`` (default 3001) when no
address is given.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medtrack.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
        from django.core.management.commands import runserver  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    runserver.Command.default_port = os.getenv('PORT', '3001')
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
