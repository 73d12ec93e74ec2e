"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Configuration, logging, error types and the album store
live in ``core``; request and response models in ``schemas``; business
rules in ``services``; and HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
