"""
Top‑level package for the Blog API.

Makes ``blog_api`` a Python package so that modules within ``app``
can be imported using fully qualified names like
``blog_api.app.main``.  All functionality lives in submodules under
``app``.
"""

__all__ = []
