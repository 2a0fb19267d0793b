from fastapi import APIRouter

from app.api.modules.v1.download.routes.download_route import router as download_router
from app.api.modules.v1.landing.routes.landing_route import router as landing_router
from app.api.modules.v1.signups.routes.signup_route import router as signup_router

router = APIRouter(prefix="/v1")
router.include_router(landing_router)
router.include_router(signup_router)
router.include_router(download_router)
