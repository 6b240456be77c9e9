"""Rotas HTTP da API.

- routes/booking/: fluxo público de agendamento
- routes/admin/: painel do profissional (consultas, pacientes, settings, assistente)
- routes/health/: health checks e readiness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
