"""
Test settings.
"""
import tempfile

from .base import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CHECKOUT = {
    **CHECKOUT,  # noqa: F405
    'MAX_QUANTITY_PER_REQUEST': 10,
    'INVOICE_BACKEND': 'file',
    'INVOICE_DIR': tempfile.mkdtemp(prefix='invoices-'),
    'CATALOG_CSV': None,
}

LOGGING = {
    **LOGGING,  # noqa: F405
    'loggers': {
        'apps': {'handlers': ['console'], 'level': 'WARNING', 'propagate': True},
    },
}
