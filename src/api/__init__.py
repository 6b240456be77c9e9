"""API: camada de borda HTTP (FastAPI).

Subpastas:
- routes/: endpoints públicos (agendamento), administrativos e health

Não contém regra de agenda; delega para app/services.
"""
