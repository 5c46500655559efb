"""Gunicorn configuration for the guest registration API."""

import os

# Server socket
bind = os.environ.get('GUNICORN_BIND', '0.0.0.0:8000')

# SQLite allows one writer at a time, so keep workers few and use threads
workers = int(os.environ.get('GUNICORN_WORKERS', 2))
threads = 4
worker_class = 'gthread'

# Excel exports and imports are built in memory
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logging
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Process naming
proc_name = 'guest-registry'

preload_app = True

# Worker recycling
max_requests = 1000
max_requests_jitter = 50
