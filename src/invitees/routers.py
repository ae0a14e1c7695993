from fastapi import APIRouter

from .features.login.router import router as login_router
from .features.register.router import router as register_router

router = APIRouter()

router.include_router(register_router)
router.include_router(login_router)
