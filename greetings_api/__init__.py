"""Greetings API package initializer.

Exposes nothing at import time; ``main.create_app`` is the application
factory and :mod:`greetings_api.config` holds the runtime settings.
"""
