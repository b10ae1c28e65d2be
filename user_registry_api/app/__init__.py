"""
Application package initializer.

``main`` assembles the FastAPI application.  ``core`` holds
configuration, logging, errors, identifiers and the record store;
``schemas`` the request/response models; ``services`` the validation
and orchestration logic; ``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
