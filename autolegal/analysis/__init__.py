from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.factory import ModelClientFactory, build_orchestrator
from autolegal.analysis.orchestrator import AnalysisConfig, AnalysisOrchestrator
from autolegal.analysis.stages import Stage

__all__ = [
    "AnalysisConfig",
    "AnalysisOrchestrator",
    "BaseModelClient",
    "ModelClientFactory",
    "Stage",
    "build_orchestrator",
]
