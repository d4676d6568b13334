import os

# Mock SECRET_KEY for tests BEFORE importing settings to bypass validation
os.environ.setdefault("SECRET_KEY", "django-insecure-test-key-for-unit-tests-only")

from .settings import *  # noqa: F403

# Override Database to use SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
    }
}

# Disable external media host
INFRASTRUCTURE["MEDIA_BACKEND"] = "mock"  # noqa: F405

CLOUDINARY = {  # noqa: F405
    "CLOUD_NAME": "test-cloud",
    "API_KEY": "test-key",
    "API_SECRET": "test-secret",
    "FOLDER": "offers-test",
    "UPLOAD_TIMEOUT": 5.0,
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
