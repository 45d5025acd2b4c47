"""Settings for the test suite: in-memory SQLite, no .env required."""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'false')

from config.settings import *  # noqa: E402,F401,F403

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
  'default': {
    'ENGINE': 'django.db.backends.sqlite3',
    'NAME': ':memory:',
  }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
