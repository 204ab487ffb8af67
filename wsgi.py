"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Keep a single worker: each process owns its own in-memory lottery.
"""

from lottery import create_app

app = create_app()
