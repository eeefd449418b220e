from abc import ABC, abstractmethod

from autolegal.analysis.models import AnalysisRequest, ModelOutcome


class BaseModelClient(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    async def generate(self, request: AnalysisRequest) -> ModelOutcome:
        """Send one request and report the outcome.

        Provider failures are returned as ``ModelOutcome.failed`` with a
        ``FailureKind``; they are not raised.
        """
