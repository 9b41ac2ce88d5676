"""Gunicorn configuration for production.

    gunicorn -c gunicorn_config.py "covid_api:create_app()"
"""
import multiprocessing
import os

# Server socket
# PORT is supplied by the hosting platform (Heroku, Railway, ...)
port = os.getenv("PORT", "5551")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
# One request per sync worker; the database pool is the only shared resource
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    cpu_count = multiprocessing.cpu_count()
    workers = min(cpu_count * 2 + 1, 8)

worker_class = "sync"
timeout = 60
keepalive = 5
graceful_timeout = 30  # Time to wait for workers to finish before killing them

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stdout
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

# Process naming
proc_name = "covid19-api"

# Server mechanics
daemon = False
pidfile = None
umask = 0
user = None
group = None
tmp_upload_dir = None
