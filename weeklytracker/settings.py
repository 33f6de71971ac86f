"""
Django settings for the weekly task tracker.

Everything deployment-specific is read from WEEKLY_* environment variables.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default="0"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("WEEKLY_SECRET_KEY", "dev-only-insecure-key")
DEBUG = _env_bool("WEEKLY_DEBUG")
# serve binds 0.0.0.0; requests for any host name or IP missing here get
# 400 DisallowedHost, so list the public name(s) or "*" when exposing it.
ALLOWED_HOSTS = [h.strip() for h in os.getenv("WEEKLY_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "tracker.apps.TrackerConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "weeklytracker.urls"
WSGI_APPLICATION = "weeklytracker.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# --- database ---
DB_ENGINE = os.getenv("WEEKLY_DB_ENGINE", "django.db.backends.sqlite3")
DB_TIMEOUT = int(os.getenv("WEEKLY_DB_TIMEOUT", "5"))

if DB_ENGINE.endswith("sqlite3"):
    _db_options = {"timeout": DB_TIMEOUT}
else:
    _db_options = {"connect_timeout": DB_TIMEOUT}

DATABASES = {
    "default": {
        "ENGINE": DB_ENGINE,
        "NAME": os.getenv("WEEKLY_DB_NAME", str(BASE_DIR / "weeklytracker.sqlite3")),
        "USER": os.getenv("WEEKLY_DB_USER", ""),
        "PASSWORD": os.getenv("WEEKLY_DB_PASSWORD", ""),
        "HOST": os.getenv("WEEKLY_DB_HOST", ""),
        "PORT": os.getenv("WEEKLY_DB_PORT", ""),
        "OPTIONS": _db_options,
    }
}

# connection handed to the task repository
TRACKER_DB_ALIAS = "default"
TRACKER_PORT = int(os.getenv("WEEKLY_PORT", "8080"))

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# --- i18n / time ---
LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("WEEKLY_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# --- logging ---
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "tracker": {
            "level": os.getenv("WEEKLY_LOG_LEVEL", "INFO"),
        },
    },
}
