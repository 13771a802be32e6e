from .base import *  # noqa

DEBUG = False
SECRET_KEY = "test-only-not-secure"
ALLOWED_HOSTS = ["testserver", "localhost"]

# File-backed so threaded tests share one database; IMMEDIATE makes each
# transaction take the write lock up front.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test_db.sqlite3",  # noqa: F405
        "OPTIONS": {
            "timeout": 30,
            "transaction_mode": "IMMEDIATE",
        },
        "TEST": {
            "NAME": BASE_DIR / "test_commissions.sqlite3",  # noqa: F405
        },
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REFERENCE_ID_MAX_ATTEMPTS = 3
REFERENCE_ID_RETRY_WAIT = 0

LOGGING["loggers"]["apps"]["level"] = "WARNING"  # noqa: F405
