import base64

import httpx
from google import genai
from google.genai import errors, types

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.models import (
    AnalysisRequest,
    FailureKind,
    InlineDataPart,
    ModelOutcome,
    TextPart,
)
from autolegal.logging.logger import Log

_INVALID_KEY_MARKERS = ("API key not valid", "API_KEY_INVALID")
_NOT_FOUND_MARKER = "Requested entity was not found"
_BILLING_MARKER = "billing"


def classify_api_error(exc: errors.APIError) -> FailureKind:
    """Map a Gemini API error to a failure kind.

    Status codes are checked together with the message markers the API
    is known to return for each case.
    """
    message = f"{exc.message or ''} {exc}"
    if exc.code == 401 or any(marker in message for marker in _INVALID_KEY_MARKERS):
        return FailureKind.AUTHENTICATION
    if exc.code == 404 or exc.status == "NOT_FOUND" or _NOT_FOUND_MARKER in message:
        return FailureKind.RESOURCE_UNAVAILABLE
    if _BILLING_MARKER in message.lower():
        return FailureKind.BILLING
    return FailureKind.TRANSPORT


class GeminiClientAdapter(BaseModelClient):
    """Model client built on the google-genai SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._client: genai.Client | None = None

    async def generate(self, request: AnalysisRequest) -> ModelOutcome:
        try:
            response = await self._get_client().aio.models.generate_content(
                model=request.model,
                contents=[types.Content(role="user", parts=self._build_parts(request))],
                config=self._build_config(request),
            )
        except errors.APIError as exc:
            Log.error(f"Gemini API error {exc.code} {exc.status}: {exc.message}")
            return ModelOutcome.failed(classify_api_error(exc), exc.message or str(exc))
        except httpx.HTTPError as exc:
            Log.error(f"Gemini network error: {exc}")
            return ModelOutcome.failed(FailureKind.TRANSPORT, str(exc) or type(exc).__name__)
        return ModelOutcome.succeeded(response.text)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=self._timeout_seconds * 1000),
            )
        return self._client

    @staticmethod
    def _build_parts(request: AnalysisRequest) -> list[types.Part]:
        parts: list[types.Part] = []
        for part in request.parts:
            if isinstance(part, InlineDataPart):
                parts.append(
                    types.Part.from_bytes(
                        data=base64.b64decode(part.data),
                        mime_type=part.mime_type,
                    )
                )
            elif isinstance(part, TextPart):
                parts.append(types.Part.from_text(text=part.text))
        return parts

    @staticmethod
    def _build_config(request: AnalysisRequest) -> types.GenerateContentConfig:
        generation = request.generation
        return types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            temperature=generation.temperature,
            top_p=generation.top_p,
            thinking_config=types.ThinkingConfig(
                thinking_budget=generation.thinking_budget,
            ),
        )
