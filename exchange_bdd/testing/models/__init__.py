"""
Modelos de dados do agregador de resultados.

Exporta:
- FeatureStats, ScenarioStats, StepStats (arvore de entidades)
- RunResult (contadores do motor), RunStats (relatorio final)
- StatResult (enum de status) e derive_feature_result (consolidacao)
"""

from .run_stats import (
    StatResult,
    StepStats,
    ScenarioStats,
    FeatureStats,
    RunResult,
    RunStats,
    derive_feature_result,
)

__all__ = [
    # Enums
    "StatResult",
    # Arvore de entidades
    "StepStats",
    "ScenarioStats",
    "FeatureStats",
    # Relatorio
    "RunResult",
    "RunStats",
    # Consolidacao
    "derive_feature_result",
]
