"""
Modulo de execucao de testes.

Contem o receptor de eventos, a ponte com o pytest-bdd e o
consolidador do relatorio final.

Exporta:
- LifecycleEvent e enums: evento de ciclo de vida do motor
- RunEventHandler, EventHandlerState: arvore de resultados da execucao
- BddEventBridge: plugin pytest que gera os eventos
- ResultsConsolidator: gera o RunStats final
"""

from exchange_bdd.testing.execution.events import (
    EntityKind,
    EventStage,
    FailureKind,
    LifecycleEvent,
)
from exchange_bdd.testing.execution.event_handler import (
    EventHandlerState,
    RunEventHandler,
    RunLifecycle,
)
from exchange_bdd.testing.execution.pytest_plugin import BddEventBridge
from exchange_bdd.testing.execution.results_consolidator import ResultsConsolidator

__all__ = [
    "EntityKind",
    "EventStage",
    "FailureKind",
    "LifecycleEvent",
    "EventHandlerState",
    "RunEventHandler",
    "RunLifecycle",
    "BddEventBridge",
    "ResultsConsolidator",
]
