"""
Application package initializer.

The project is organised into layers: ``core`` (configuration,
logging, database, security, errors and the response envelope),
``schemas`` (pydantic models), ``services`` (SQL per domain) and
``api/<version>/endpoints`` (FastAPI routers).  Versioning is handled
by grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
