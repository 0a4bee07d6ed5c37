from fastapi import APIRouter

from .menus import router as menus_router


router = APIRouter()
router.include_router(menus_router)
