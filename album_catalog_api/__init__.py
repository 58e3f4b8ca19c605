"""
Top‑level package for the Album Catalog API.

Marks ``album_catalog_api`` as a Python package so that modules within
``app`` can be imported using fully qualified names such as
``album_catalog_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
