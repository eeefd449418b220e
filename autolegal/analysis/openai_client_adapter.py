import httpx
import openai

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.models import (
    AnalysisRequest,
    FailureKind,
    InlineDataPart,
    ModelOutcome,
    TextPart,
)
from autolegal.logging.logger import Log

_BILLING_MARKERS = ("billing", "insufficient_quota", "quota")


def _mentions_billing(exc: openai.APIError) -> bool:
    text = f"{exc.message} {getattr(exc, 'code', '') or ''}".lower()
    return any(marker in text for marker in _BILLING_MARKERS)


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on an OpenAI-compatible chat completions API.

    The thinking budget has no equivalent in chat completions and is not sent.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def generate(self, request: AnalysisRequest) -> ModelOutcome:
        try:
            response = await self._client.chat.completions.create(
                model=request.model,
                temperature=request.generation.temperature,
                top_p=request.generation.top_p,
                messages=[
                    {"role": "system", "content": request.system_instruction},
                    {"role": "user", "content": self._build_content(request)},
                ],
            )
        except openai.AuthenticationError as exc:
            return self._failed(FailureKind.AUTHENTICATION, exc)
        except openai.NotFoundError as exc:
            return self._failed(FailureKind.RESOURCE_UNAVAILABLE, exc)
        except (openai.PermissionDeniedError, openai.RateLimitError) as exc:
            kind = FailureKind.BILLING if _mentions_billing(exc) else FailureKind.TRANSPORT
            return self._failed(kind, exc)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            Log.error(f"AI provider network error: {exc}")
            return ModelOutcome.failed(FailureKind.TRANSPORT, f"network error: {exc}")
        except openai.APIError as exc:
            return self._failed(FailureKind.TRANSPORT, exc)

        if not response.choices:
            return ModelOutcome.succeeded(None)
        return ModelOutcome.succeeded(response.choices[0].message.content)

    @staticmethod
    def _failed(kind: FailureKind, exc: openai.APIError) -> ModelOutcome:
        Log.error(f"AI provider API error ({kind.value}): {exc.message}")
        return ModelOutcome.failed(kind, exc.message)

    @staticmethod
    def _build_content(request: AnalysisRequest) -> list[dict[str, object]]:
        content: list[dict[str, object]] = []
        for index, part in enumerate(request.parts):
            if isinstance(part, InlineDataPart):
                data_url = f"data:{part.mime_type};base64,{part.data}"
                if part.mime_type.startswith("image/"):
                    content.append({"type": "image_url", "image_url": {"url": data_url}})
                else:
                    content.append({
                        "type": "file",
                        "file": {"filename": f"document-{index + 1}", "file_data": data_url},
                    })
            elif isinstance(part, TextPart):
                content.append({"type": "text", "text": part.text})
        return content
