"""Router do painel administrativo: agrega consultas, pacientes, settings e assistente."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.appointments import router as appointments_router
from api.routes.admin.assistant import router as assistant_router
from api.routes.admin.patients import router as patients_router
from api.routes.admin.settings import router as settings_router

router = APIRouter()

router.include_router(appointments_router)
router.include_router(patients_router, prefix="/patients")
router.include_router(settings_router, prefix="/settings")
router.include_router(assistant_router, prefix="/assistant")
