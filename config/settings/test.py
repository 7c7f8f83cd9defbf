"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="Kd1WnQ7sLpR2yTb8ZcX4vHj0GmA6eUf3NoIs9rEwYtBqMzPaVlCxJhDgOkSiFuT5",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"
ALLOWED_HOSTS = ["testserver", "localhost"]

# DATABASES
# ------------------------------------------------------------------------------
# SQLite test databases are created in memory.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

# PASSWORDS
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#password-hashers
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# DASHBOARD
# ------------------------------------------------------------------------------
DASHBOARD_SEED_ON_STARTUP = False
DASHBOARD_SEED_READY_ATTEMPTS = 1
DASHBOARD_SEED_READY_DELAY = 0.0
DASHBOARD_BROADCAST_MODE = "snapshot"
SOCKETIO_REDIS_URL = ""
# Your stuff...
# ------------------------------------------------------------------------------
