# Gunicorn configuration for production
# Usage: gunicorn -c gunicorn.conf.py welcome.api.main:app

import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8080")

# Pages are rendered from an in-memory catalog; a few workers are plenty
workers = int(os.getenv("GUNICORN_WORKERS", os.getenv("WEB_CONCURRENCY", 2)))

# Use Uvicorn workers for async support
worker_class = "uvicorn.workers.UvicornWorker"

timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", 5))

# Logging
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")  # stdout
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")  # stderr
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")

access_log_format = '{"time": "%(t)s", "status": %(s)s, "method": "%(m)s", "path": "%(U)s", "duration_ms": %(D)s, "remote_addr": "%(h)s"}'

# Application loggers ("welcome.*") go to stderr next to gunicorn's own
logconfig_dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "stderr": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "welcome": {"handlers": ["stderr"], "level": loglevel.upper(), "propagate": False},
    },
}

# Catalog validation runs once in the master before forking
preload_app = True

proc_name = "welcome"
