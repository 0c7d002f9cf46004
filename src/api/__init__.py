"""API: camada de borda HTTP.

Responsabilidades:
- Definir endpoints HTTP (health, controle do grupo)
- Ler parâmetros da query string e delegar aos use cases
- Mapear resultados para status/corpo HTTP
- Isolar falhas por requisição (isolation.py)

NÃO PODE conter: FSM, regras de sessão, chamadas diretas ao colaborador.
"""
