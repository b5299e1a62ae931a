"""
Exchange BDD - runner BDD para o cliente da API da exchange

Modulos:
- testing: agregador de eventos de teste, relatorio e runner pytest-bdd
- api: cliente HTTP e assinatura de requisicoes da exchange
- config: configuracao da execucao
- cli: linha de comando (exchange-bdd)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
