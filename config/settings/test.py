"""Test settings for SpotBnB project.

Runs against SQLite unless ``DB_ENGINE`` points elsewhere, which lets the
PostgreSQL-only concurrency tests run in CI.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

LOGGING['handlers']['console']['level'] = 'WARNING'  # noqa: F405

# Threaded admission tests need a file-backed SQLite database: the in-memory
# test database is shared-cache and ignores the busy timeout.
if DB_ENGINE == 'django.db.backends.sqlite3':  # noqa: F405
    DATABASES['default']['TEST'] = {'NAME': str(BASE_DIR / 'test_db.sqlite3')}  # noqa: F405
    DATABASES['default']['OPTIONS']['timeout'] = 30  # noqa: F405
