"""
WSGI entrypoint for production (gunicorn/systemd).

Loads config.json, sweeps orphaned spool files and creates the Flask app.
TLS is left to the WSGI server here; main.py handles it for the built-in server.
"""
from spooler.config import load_config
from spooler.job_manager import PrintJobManager
from web.app import create_app

config = load_config()
manager = PrintJobManager.from_config(config)
manager.recover_orphans()

app = create_app(config, manager)
