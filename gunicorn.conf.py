"""
Gunicorn configuration for Lunchly.
Settings are read from the environment, with defaults sized for SQLite.
"""

import os

# Server socket
bind = os.environ.get('GUNICORN_BIND') or f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# SQLite allows a single writer, so keep the process count small
workers = int(os.environ.get('GUNICORN_WORKERS', 2))
threads = int(os.environ.get('GUNICORN_THREADS', 4))
worker_class = 'gthread'

timeout = int(os.environ.get('GUNICORN_TIMEOUT', 30))
graceful_timeout = timeout
keepalive = 5

# Logging, next to the application logs written by app.py
log_dir = os.environ.get('LOG_DIR') or 'logs'
os.makedirs(log_dir, exist_ok=True)
accesslog = os.path.join(log_dir, 'gunicorn-access.log')
errorlog = os.path.join(log_dir, 'gunicorn-error.log')
loglevel = os.environ.get('GUNICORN_LOG_LEVEL', 'info')
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)sus'

proc_name = 'lunchly'

# wsgi.py validates config and builds the app once, before workers fork
preload_app = True
