"""WSGI entrypoint for deploying the FinCalc API behind Passenger or gunicorn."""

from fincalc.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()
