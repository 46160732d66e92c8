"""
HTTP layer of the Blog API.

Routes are grouped by API version (``v1``).  Each version exposes a
``router`` that the application mounts under ``/api/<version>``.
"""
