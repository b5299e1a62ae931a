"""
Exchange BDD - Testing Module

Agregador de resultados de execucoes BDD. Recebe os eventos de
ciclo de vida do motor (features, cenarios e steps), monta a arvore
de resultados e gera o relatorio final no console e em JSON.

## Fluxo

- BddEventBridge (pytest-bdd) -> RunEventHandler.handle(evento)
- Fim da execucao: RunEventHandler.close()
- ResultsConsolidator: contadores do motor + copia da arvore -> RunStats
- print_test_results / write_result_file

## Uso Rapido

    from exchange_bdd.config import get_config
    from exchange_bdd.testing import BddTestRunner

    outcome = BddTestRunner(get_config().validate()).run()
    print(f"Cenarios com falha: {outcome.stats.failed_scenarios}")
"""

# Orquestrador principal
from .runner import BddTestRunner, RunOutcome

# Modelos de dados
from .models import (
    StatResult,
    StepStats,
    ScenarioStats,
    FeatureStats,
    RunResult,
    RunStats,
    derive_feature_result,
)

# Execucao
from .execution import (
    EntityKind,
    EventStage,
    FailureKind,
    LifecycleEvent,
    EventHandlerState,
    RunEventHandler,
    RunLifecycle,
    BddEventBridge,
    ResultsConsolidator,
)

# Relatorio
from .report import format_test_results, print_test_results, write_result_file

__all__ = [
    # Orquestrador principal
    "BddTestRunner",
    "RunOutcome",

    # Modelos de dados
    "StatResult",
    "StepStats",
    "ScenarioStats",
    "FeatureStats",
    "RunResult",
    "RunStats",
    "derive_feature_result",

    # Execucao
    "EntityKind",
    "EventStage",
    "FailureKind",
    "LifecycleEvent",
    "EventHandlerState",
    "RunEventHandler",
    "RunLifecycle",
    "BddEventBridge",
    "ResultsConsolidator",

    # Relatorio
    "format_test_results",
    "print_test_results",
    "write_result_file",
]
