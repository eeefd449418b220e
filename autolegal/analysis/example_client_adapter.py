"""Offline model client.

Returns a fixed audit without any network calls. Useful for local runs,
demos and tests, and as a template for new provider adapters: implement
BaseModelClient and register the provider in ModelClientFactory.
"""

from typing import ClassVar

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.models import AnalysisRequest, ModelOutcome


class ExampleClientAdapter(BaseModelClient):
    """Answers every request with the same canned report."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "✅ Документы получены: {count}.\n"
        "⚠️ Это демонстрационный ответ без обращения к модели.\n"
        "Итог: требуется проверка настоящей моделью."
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = response

    async def generate(self, request: AnalysisRequest) -> ModelOutcome:
        if self._response is not None:
            return ModelOutcome.succeeded(self._response)
        return ModelOutcome.succeeded(
            self.DEFAULT_RESPONSE.format(count=len(request.inline_parts))
        )
