"""
Endpoint modules.  Each defines an ``APIRouter`` for one resource.
"""
