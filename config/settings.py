import logging
import os
import sys
from dotenv import load_dotenv
from corsheaders.defaults import default_headers
from django.utils.translation import gettext_lazy as _

load_dotenv()

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

ROOT_DIR = os.path.dirname(PROJECT_DIR)

APPS_DIR = os.path.join(PROJECT_DIR, 'ats')

BASE_DIR = os.path.join(PROJECT_DIR, 'config')

DEBUG = eval(os.environ.get('DEBUG', 'False'))

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '*').split(',')

DJANGO_APPS = (
    'daphne',
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
)

THIRD_PARTY_APPS = (
    'corsheaders',
    'rest_framework',
    'django_filters',
    'channels',
)

PROJECT_APPS = (
    'ats.users',
    'ats.recruitment',
    'ats.notification',
    'ats.websocket',
)

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + PROJECT_APPS

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
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
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

ASGI_APPLICATION = 'config.routing.application'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {'min_length': 6},
    },
]

TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

USE_I18N = True

USE_TZ = True

LANGUAGES = (
    ('en', _('English')),
)

LANGUAGE_CODE = 'en'

# Static Files Configuration
DEFAULT_STATIC_ROOT = os.path.join(ROOT_DIR, 'static/')
STATIC_ROOT = os.environ.get('STATIC_ROOT', DEFAULT_STATIC_ROOT)
STATIC_URL = '/static/'
# /Static Files Configuration

AUTH_USER_MODEL = 'users.User'

CORS_ALLOW_HEADERS = default_headers + (
    'Accept-Confirm',
)

CORS_ORIGIN_ALLOW_ALL = eval(os.environ.get('CORS_ORIGIN_ALLOW_ALL', 'False'))

CORS_ALLOW_CREDENTIALS = True

# Rest Framework Config
DRF_RENDERER_CLASSES = ['rest_framework.renderers.JSONRenderer']

DRF_BROWSABLE_API = eval(os.environ.get('DRF_BROWSABLE_API', 'False'))

if DRF_BROWSABLE_API:
    DRF_RENDERER_CLASSES.append('rest_framework.renderers.BrowsableAPIRenderer')
# End Rest Framework Config

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication'
    ],
    'DEFAULT_FILTER_BACKENDS': (
        'django_filters.rest_framework.DjangoFilterBackend',
    ),
    'DEFAULT_RENDERER_CLASSES': DRF_RENDERER_CLASSES,
    'EXCEPTION_HANDLER': 'ats.core.utils.exceptions.message_exception_handler',
}

SECRET_KEY = os.environ.get('SECRET_KEY', 'HFJFHFUJKklhsalkjhslakdjgf88989898')

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')

if os.environ.get('DATABASE_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DATABASE_NAME'),
            'USER': os.environ.get('DATABASE_USER', None),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', None),
            'HOST': os.environ.get('DATABASE_HOST', 'localhost'),
            'PORT': os.environ.get('DATABASE_PORT', '5432'),
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(PROJECT_DIR, 'db.sqlite3'),
        },
    }

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Redis backs the channel layer and the cache when REDIS_HOST is set,
# otherwise both stay in process.
REDIS_HOST = os.environ.get('REDIS_HOST')
REDIS_PORT = int(os.environ.get('REDIS_PORT', '6379'))

if REDIS_HOST:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": "redis://{0}:{1}/{2}".format(
                REDIS_HOST,
                REDIS_PORT,
                os.environ.get('CACHES_REDIS_DB_NAME', '1')
            ),
            "TIMEOUT": int(os.environ.get('CACHE_TIMEOUT', '300')),
            "OPTIONS": {
                "CLIENT_CLASS": "django_redis.client.DefaultClient"
            },
        }
    }
    CHANNEL_LAYERS = {
        "default": {
            "BACKEND": "channels_redis.core.RedisChannelLayer",
            "CONFIG": {
                "hosts": [(REDIS_HOST, REDIS_PORT)],
            },
        },
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "ats",
        }
    }
    CHANNEL_LAYERS = {
        "default": {
            "BACKEND": "channels.layers.InMemoryChannelLayer"
        },
    }

# Real-time layer
WEBSOCKET_LIVENESS_SWEEP = eval(os.environ.get('WEBSOCKET_LIVENESS_SWEEP', 'True'))
WEBSOCKET_SWEEP_INTERVAL = int(os.environ.get('WEBSOCKET_SWEEP_INTERVAL', 30))
WEBSOCKET_CLIENT_HEARTBEAT_INTERVAL = int(
    os.environ.get('WEBSOCKET_CLIENT_HEARTBEAT_INTERVAL', 60)
)
NOTIFICATION_HISTORY_LIMIT = int(os.environ.get('NOTIFICATION_HISTORY_LIMIT', 10))

APPLICANT_LIST_CACHE_TIMEOUT = int(os.environ.get('APPLICANT_LIST_CACHE_TIMEOUT', 300))
RECENT_APPLICANTS_LIMIT = 10

FRONTEND_URL = os.environ.get('FRONTEND_URL', "http://localhost:3000")
BACKEND_URL = os.environ.get('BACKEND_URL', 'http://localhost:8000')

SHOW_LOGS_ON_CONSOLE = eval(os.environ.get('SHOW_LOGS_ON_CONSOLE', 'False'))

# LOGGING FORMATS AND CONFIGURATIONS
LOG_DIRECTORY = os.environ.get(
    'LOG_DIRECTORY',
    os.path.join(
        PROJECT_DIR if ENVIRONMENT == 'development' else ROOT_DIR,
        'logs'
    )
)
if not os.path.exists(LOG_DIRECTORY):
    os.makedirs(LOG_DIRECTORY, exist_ok=True)

extend_logging = dict()
extend_handlers = dict()


class RequireConsoleLog(logging.Filter):
    def filter(self, record):
        allowed_site_packages = ('django', 'rest_framework', 'channels', 'daphne')
        if 'site-packages' in record.pathname:
            return any([x in record.pathname for x in allowed_site_packages])
        return SHOW_LOGS_ON_CONSOLE


for module in PROJECT_APPS:
    extend_logging.update({
        module: {
            'handlers': [module, 'console'],
            'level': 'DEBUG',
            'propagate': False,
        }
    })
    extend_handlers.update({
        module: {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'formatter': 'verbose',
            'filename': os.path.join(
                LOG_DIRECTORY, module.split('.')[1] + '.log'
            ),
            'when': 'midnight',
            'delay': True,
        }
    })

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '\n%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s',
        },
        'simple': {
            'format': '{levelname} {message} -->from [{module}]',
            'style': '{'
        },
    },
    'filters': {
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue',
        },
        'require_console_log': {
            '()': RequireConsoleLog
        }
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'debug.log'),
            'formatter': 'verbose',
            'when': 'midnight',
            'delay': True,
        },
        'console': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', 'require_console_log'],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'django': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'django.log'),
            'formatter': 'verbose',
            'delay': True,
        },
        **extend_handlers
    },
    'loggers': {
        '': {
            'handlers': ['default', 'console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django': {
            'handlers': ['django'],
            'propagate': True,
        },
        **extend_logging
    },
}

RUNNING_TESTS = 'test' in sys.argv or 'pytest' in sys.modules
if RUNNING_TESTS:
    PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
