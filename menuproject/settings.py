"""Django-Einstellungen für das Beispielprojekt und die Tests."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "cssmenu-insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "cssmenu.apps.CssMenuConfig",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
]

ROOT_URLCONF = "menuproject.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "cssmenu.context_processors.cssmenu_navigation",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DJANGO_DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
LANGUAGE_CODE = "de-de"

STATIC_URL = "/static/"

# CSS-Menü
CSSMENU_ASSET_ROOT = os.environ.get("CSSMENU_ASSET_ROOT", str(BASE_DIR / "public"))
CSSMENU_ASSET_URL = ""
CSSMENU_IMAGE_MATCH = os.environ.get("CSSMENU_IMAGE_MATCH", "last")
CSSMENU_RENDER_HIDDEN_CHILDREN = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "missing_icons": {"()": "menuproject.logging_filters.FallbackFilter"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
        "missing_icons": {
            "class": "logging.StreamHandler",
            "filters": ["missing_icons"],
            "level": "WARNING",
        },
    },
    "loggers": {
        "cssmenu": {
            "handlers": ["console"],
            "level": os.environ.get("CSSMENU_LOG_LEVEL", "INFO"),
        },
        "cssmenu.images": {
            "handlers": ["missing_icons"],
            "level": os.environ.get("CSSMENU_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
