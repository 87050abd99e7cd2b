"""
Gunicorn configuration for production deployment.
"""
import os

# Server socket
PORT = int(os.environ.get("PORT", 5000))
bind = f"0.0.0.0:{PORT}"

# Each request blocks on one Redis round-trip, so plain sync workers suffice
workers = int(os.environ.get("WEB_CONCURRENCY", 2))
worker_class = "sync"
timeout = 30
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"

# Process naming
proc_name = "profile-lookup"

wsgi_app = "wsgi:app"
