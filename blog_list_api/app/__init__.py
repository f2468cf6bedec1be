"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
HTTP routes live in ``api``, request and response models in
``schemas``, business logic in ``services`` and persistence behind the
document-store clients in ``stores``.
"""

from .main import app, create_app  # noqa: F401
