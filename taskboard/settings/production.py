# taskboard/settings/production.py

from .base import *

# === PRODUCTION ===

DEBUG = False

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default=['localhost'])

# === SECURITY ===

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_SSL_REDIRECT = env('SECURE_SSL_REDIRECT', cast=bool, default=True)
SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_HSTS_SECONDS = env('SECURE_HSTS_SECONDS', cast=int, default=0)
X_FRAME_OPTIONS = 'DENY'

# === DATABASE ===

DATABASES['default']['CONN_MAX_AGE'] = env('CONN_MAX_AGE', cast=int, default=600)

# === LOGGING ===

LOGGING['handlers']['console']['formatter'] = 'verbose'

# === VALIDATION ===

if SECRET_KEY.startswith('django-insecure'):
    raise ValueError("SECRET_KEY environment variable is required in production")
