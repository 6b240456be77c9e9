"""App: coração do sistema: agenda, regras de reserva e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos puros (consulta, paciente, configurações)
- services/: geração de horários, validação de reservas e ações do painel
- infra/: implementações concretas de IO (stores, OpenAI)
- protocols/: contratos/interfaces
- observability/: correlation id e métricas em log

Padrão: app executa; api adapta; config configura; utils apoia.
"""
