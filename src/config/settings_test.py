"""Settings for the pytest run: fixed secret, throwaway SQLite database."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403

DEBUG = False
FRONTEND_URL = "http://frontend.test"
CORS_ALLOWED_ORIGINS = [FRONTEND_URL]
