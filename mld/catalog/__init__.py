"""
Catalog module: CCTV, NanoBeam và gói Internet dùng chung một bộ CRUD
"""

from .kinds import CATALOG_KINDS, CCTV, NANOBEAM, INTERNET, CatalogKind
from .routes import build_catalog_router, routers

__all__ = [
    "CATALOG_KINDS", "CCTV", "NANOBEAM", "INTERNET", "CatalogKind",
    "build_catalog_router", "routers",
]
