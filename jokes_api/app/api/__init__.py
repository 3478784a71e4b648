"""
API package containing the HTTP routes.

``router`` in ``api/router.py`` includes every endpoint module; the
application factory mounts it at the root path.
"""
