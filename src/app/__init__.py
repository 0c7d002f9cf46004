"""App: coração do serviço: sessão, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- sessions/: sessão de mensageria, pareamento e shutdown
- use_cases/: operações de grupo (inputs/outputs, sem IO direto)
- domain/: JID, grupo e cartão de contato
- infra/: implementações concretas de IO (neonize, SQLite, QR)
- protocols/: contratos/interfaces dos colaboradores
- observability/: correlation_id, métricas e redação de PII

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
