"""
Excecoes do pacote exchange_bdd.

Hierarquia:
- ExchangeBddError: base de todos os erros do pacote
- EntityLookupError: evento referencia feature/cenario/step inexistente
- DuplicateEntityError: evento de criacao repete uma entidade existente
- RunStateError: operacao incompativel com o estado da execucao
- ValidationError: configuracao ou parametros invalidos
"""

from typing import Optional


class ExchangeBddError(Exception):
    """Erro base do pacote."""
    pass


def _describe(entity_kind: str, key: str) -> str:
    return f"{entity_kind.capitalize()} '{key}'"


class EntityLookupError(ExchangeBddError, LookupError):
    """
    Violacao de protocolo: a entidade pai de um evento nao foi encontrada.

    O agregador nunca recria ancestrais ausentes; o chamador decide se
    o erro encerra a execucao (o runner trata como fatal).
    """

    def __init__(self, entity_kind: str, key: str, operation: Optional[str] = None):
        self.entity_kind = entity_kind
        self.key = key
        self.operation = operation

        message = f"{_describe(entity_kind, key)} not found"
        if operation:
            message += f" while {operation}"
        super().__init__(message)


class DuplicateEntityError(ExchangeBddError):
    """Evento de criacao para uma entidade que ja existe no mesmo pai."""

    def __init__(self, entity_kind: str, key: str):
        self.entity_kind = entity_kind
        self.key = key
        super().__init__(f"{_describe(entity_kind, key)} already exists")


class RunStateError(ExchangeBddError):
    """Operacao invalida para o estado atual da execucao (OPEN/CLOSED)."""
    pass


class ValidationError(ExchangeBddError):
    """Excecao para erros de validacao de configuracao."""
    pass
