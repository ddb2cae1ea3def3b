"""Gunicorn configuration for the reservation API.

Run with: gunicorn -c gunicorn_config.py "autocheckin:create_app()"
"""
import multiprocessing
import os
import sys

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
# Two per CPU, between 2 and 8
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    workers = max(2, min(multiprocessing.cpu_count() * 2, 8))

worker_class = "sync"
# Must outlast RETRIEVAL_TIMEOUT_SECONDS plus its retries
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

capture_output = True
enable_stdio_inheritance = True

# Keep worker logs on one stream
sys.stderr = sys.stdout

proc_name = "autocheckin"

daemon = False
pidfile = None
umask = 0
