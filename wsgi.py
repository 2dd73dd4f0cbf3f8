"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Game state lives in the worker process, so run a single worker.
"""

from bingo import create_app

app = create_app()
