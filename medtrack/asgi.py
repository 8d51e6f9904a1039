"""
ASGI config for medtrack project.

Serves the HTTP API under an ASGI server such as uvicorn or daphne.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medtrack.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
