"""
Version 1 of the API.

This subpackage bundles the album and health endpoints.  Paths are
mounted at the application root so that ``/albums`` and ``/`` are
served exactly as clients of the original service expect.
"""
