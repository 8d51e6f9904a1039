"""
Settings used by the test suite.

Provides a throwaway signing key and a file-backed SQLite test database so
that threads running concurrent requests share committed rows.
"""
import os

os.environ.setdefault("JWT_SECRET", "test-signing-key-not-for-production")

from .settings import *  # noqa: E402,F401,F403

DATABASES["default"]["TEST"] = {"NAME": (BASE_DIR / "test_db.sqlite3").as_posix()}  # noqa: F405

# Fast hashing keeps the suite quick; the salted format is unchanged.
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
