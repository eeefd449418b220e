"""Builds the audit request, calls the model once and maps the outcome."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.exceptions import (
    AnalysisError,
    AuthenticationError,
    BillingError,
    ConfigurationError,
    EmptyResponseError,
    ResourceUnavailableError,
    TransportError,
)
from autolegal.analysis.models import (
    AnalysisRequest,
    FailureKind,
    GenerationConfig,
    InlineDataPart,
    ModelOutcome,
    RequestPart,
    TextPart,
)
from autolegal.analysis.prompt_loader import PromptCatalog
from autolegal.analysis.stages import Stage
from autolegal.ingestion.models import EncodedFile
from autolegal.logging.logger import Log

_PLACEHOLDER_KEYS = frozenset({"", "undefined"})

MISSING_KEY_MESSAGE = (
    "API ключ не найден. Добавьте переменную API_KEY в настройки окружения "
    "(или в файл .env) и перезапустите приложение."
)
INVALID_KEY_MESSAGE = (
    "ОШИБКА: Ваш API-ключ недействителен. Пожалуйста, создайте новый ключ "
    "на aistudio.google.com и обновите переменную API_KEY."
)
MODEL_UNAVAILABLE_MESSAGE = (
    "Ошибка: Модель '{model}' недоступна для вашего ключа. Проверьте доступ "
    "аккаунта к этой модели или используйте другой аккаунт Google AI Studio."
)
BILLING_MESSAGE = (
    "Ошибка: Для использования этой модели необходимо подключить платный "
    "аккаунт (Billing) в Google Cloud."
)
EMPTY_RESPONSE_MESSAGE = (
    "Модель вернула пустой ответ. Попробуйте загрузить документы более четко."
)
TRANSPORT_MESSAGE_PREFIX = "Ошибка анализа: "


@dataclass(frozen=True)
class AnalysisConfig:
    """Everything the orchestrator needs from the deployment."""

    api_key: str
    model: str
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    @property
    def has_credential(self) -> bool:
        return self.api_key.strip() not in _PLACEHOLDER_KEYS


class AnalysisOrchestrator:
    """Single entry point turning staged files and a stage into an audit text."""

    def __init__(
        self,
        *,
        client: BaseModelClient,
        config: AnalysisConfig,
        catalog: PromptCatalog,
    ) -> None:
        self._client = client
        self._config = config
        self._catalog = catalog

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def build_request(self, files: Sequence[EncodedFile], stage: Stage) -> AnalysisRequest:
        """Assemble the request: every file in order, then the stage instruction."""
        instruction = self._catalog.resolve_template(stage)
        parts: list[RequestPart] = [
            InlineDataPart(data=f.content, mime_type=f.media_type) for f in files
        ]
        parts.append(TextPart(text=instruction))
        return AnalysisRequest(
            model=self._config.model,
            parts=tuple(parts),
            system_instruction=self._catalog.system_instruction,
            generation=self._config.generation,
        )

    async def analyze(self, files: Sequence[EncodedFile], stage: Stage) -> str:
        """Run one audit.

        Expects a non-empty ``files`` list; the caller rejects empty selections.

        Returns:
            The model's audit text.

        Raises:
            AnalysisError: exactly one classified failure per failed call.
        """
        if not self._config.has_credential:
            Log.error("Analysis aborted: API key is not configured")
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        request = self.build_request(files, stage)
        Log.info(
            f"Requesting {Stage(stage).value} audit of {len(files)} files "
            f"from model {request.model}"
        )

        try:
            outcome = await self._client.generate(request)
        except Exception as exc:
            Log.exception(f"Model client failed unexpectedly: {exc}")
            raise TransportError(f"{TRANSPORT_MESSAGE_PREFIX}{exc}") from exc

        return self._unwrap(outcome)

    def _unwrap(self, outcome: ModelOutcome) -> str:
        if outcome.failure is not None:
            raise self._error_for(outcome.failure, outcome.detail)
        text = outcome.text
        if text is None or not text.strip():
            Log.warning("Model returned an empty response")
            raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)
        Log.debug(f"Model returned {len(text)} chars")
        return text

    def _error_for(self, kind: FailureKind, detail: str) -> AnalysisError:
        match kind:
            case FailureKind.AUTHENTICATION:
                return AuthenticationError(INVALID_KEY_MESSAGE)
            case FailureKind.RESOURCE_UNAVAILABLE:
                return ResourceUnavailableError(
                    MODEL_UNAVAILABLE_MESSAGE.format(model=self._config.model)
                )
            case FailureKind.BILLING:
                return BillingError(BILLING_MESSAGE)
            case FailureKind.TRANSPORT:
                return TransportError(f"{TRANSPORT_MESSAGE_PREFIX}{detail}")
