"""
Django settings for splitLedger.

Everything environment-specific is read from the environment (or a .env
file next to manage.py).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


# ---------------- Security ------------------------------------------------- #

# Fail loud if SECRET_KEY is not set
SECRET_KEY = os.environ['SECRET_KEY']

# Fail loud if DEBUG is not explicitly set
_debug = os.environ.get('DEBUG')
if _debug is None:
  raise ValueError('DEBUG must be explicitly set in environment (true/false)')
DEBUG = _debug.lower() == 'true'

ALLOWED_HOSTS = [
  host.strip()
  for host in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
  if host.strip()
]

CSRF_TRUSTED_ORIGINS = [
  origin.strip()
  for origin in os.getenv('CSRF_TRUSTED_ORIGINS', '').split(',')
  if origin.strip()
]


# ---------------- Application definition ---------------------------------- #

INSTALLED_APPS = [
  'django.contrib.admin',
  'django.contrib.auth',
  'django.contrib.contenttypes',
  'django.contrib.sessions',
  'django.contrib.messages',
  'django.contrib.staticfiles',
  # third-party
  'django_htmx',
  'django_extensions',
  # project apps
  'api',
]

MIDDLEWARE = [
  'django.middleware.security.SecurityMiddleware',
  'django.contrib.sessions.middleware.SessionMiddleware',
  'middleware.wide_event_logging.WideEventLoggingMiddleware',
  'django_htmx.middleware.HtmxMiddleware',
  'django.middleware.common.CommonMiddleware',
  'django.middleware.csrf.CsrfViewMiddleware',
  'django.contrib.auth.middleware.AuthenticationMiddleware',
  'django.contrib.messages.middleware.MessageMiddleware',
  'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
  {
    'BACKEND': 'django.template.backends.django.DjangoTemplates',
    'DIRS': [],
    'APP_DIRS': True,
    'OPTIONS': {
      'context_processors': [
        'django.template.context_processors.request',
        'django.contrib.auth.context_processors.auth',
        'django.contrib.messages.context_processors.messages',
      ],
    },
  },
]

WSGI_APPLICATION = 'config.wsgi.splitLedger'


# ---------------- Database ------------------------------------------------ #

DATABASES = {
  'default': {
    'ENGINE': 'django.db.backends.postgresql',
    'NAME': os.getenv('PG_DATABASE', ''),
    'USER': os.getenv('PG_USER', ''),
    'PASSWORD': os.getenv('PG_PASS', ''),
    'HOST': os.getenv('PG_HOST', ''),
    'PORT': os.getenv('PG_PORT', '5432'),
    'CONN_MAX_AGE': 600,
  }
}

# ---------------- Auth ---------------------------------------------------- #

AUTH_USER_MODEL = 'api.User'
LOGIN_URL = '/api/auth/login/'

AUTH_PASSWORD_VALIDATORS = [
  {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
  {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
  {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]


# ---------------- Internationalization ------------------------------------ #

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True


# ---------------- Static files -------------------------------------------- #

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# ---------------- Logging ------------------------------------------------- #

LOGGING = {
  'version': 1,
  'disable_existing_loggers': False,
  'formatters': {
    'wide_event': {
      'format': '%(message)s',
    },
  },
  'handlers': {
    'wide_event_console': {
      'class': 'logging.StreamHandler',
      'formatter': 'wide_event',
    },
  },
  'loggers': {
    'wide_event': {
      'handlers': ['wide_event_console'],
      'level': os.getenv('WIDE_EVENT_LOG_LEVEL', 'INFO'),
      'propagate': False,
    },
  },
}
