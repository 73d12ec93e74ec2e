"""
Top‑level package for the Album API.

This file makes ``album_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``album_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
