from fastapi import APIRouter
from .routes.info import router as info_router
from .routes.tools import router as tools_router

router = APIRouter()
router.include_router(info_router)
router.include_router(tools_router)
