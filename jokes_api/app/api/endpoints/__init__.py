"""
Endpoint modules.

Each module in this package defines an APIRouter for one group of
routes.  The routers are aggregated in ``api/router.py`` and then
included in the main application.
"""
