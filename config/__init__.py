"""Top-level package for Django configuration.

This package exposes application configuration for the SpotBnB platform. It
contains settings modules for different environments and entry points
for WSGI and ASGI.
"""
