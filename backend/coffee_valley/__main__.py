"""Allows `python -m coffee_valley` to start the API server."""

from coffee_valley.main import run

run()
