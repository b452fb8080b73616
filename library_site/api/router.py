"""
FastAPI router for the library-site API.

Public routes sit at the root of the mount prefix; admin routes under /admin.
"""

from fastapi import APIRouter

from library_site.api.endpoints import auth, contacts, content, health, site_settings

router = APIRouter()
router.include_router(health.router)

# Public site
router.include_router(site_settings.public_router)
router.include_router(content.public_router)
router.include_router(contacts.public_router)

# Admin console
router.include_router(auth.router)
router.include_router(site_settings.admin_router)
router.include_router(content.admin_router)
router.include_router(contacts.admin_router)

__all__ = ["router"]
