"""
WSGI config for the SuperFix project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'superfix.settings')

application = get_wsgi_application()
