"""
Top‑level package for the Blog List API.

This file makes ``blog_list_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``blog_list_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
