# auction/auction/wsgi.py
import os
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'auction.settings')
from django.core.wsgi import get_wsgi_application

application = get_wsgi_application()
