"""WSGI entry point: gunicorn wsgi:application -c gunicorn.conf.py"""
import os
from app import create_app

application = create_app(os.environ.get('FLASK_ENV', 'production'))
