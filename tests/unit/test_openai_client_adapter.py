from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from autolegal.analysis.models import (
    AnalysisRequest,
    FailureKind,
    InlineDataPart,
    TextPart,
)
from autolegal.analysis.openai_client_adapter import OpenAIClientAdapter

_URL = "https://api.openai.com/v1/chat/completions"


def _response(status: int) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("POST", _URL))


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _request() -> AnalysisRequest:
    return AnalysisRequest(
        model="gpt-4o",
        parts=(
            InlineDataPart(data="QUJD", mime_type="image/jpeg"),
            InlineDataPart(data="REVG", mime_type="application/pdf"),
            TextPart(text="check"),
        ),
        system_instruction="system",
    )


async def _generate(**create_kwargs: object) -> tuple:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(**create_kwargs)
    with patch(
        "autolegal.analysis.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        outcome = await adapter.generate(_request())
    return outcome, mock_client.chat.completions.create


class TestOpenAIClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        outcome, _ = await _generate(return_value=_make_mock_response("OK: compliant"))
        assert outcome.ok
        assert outcome.text == "OK: compliant"

    @pytest.mark.asyncio
    async def test_builds_multimodal_message(self) -> None:
        _, create = await _generate(return_value=_make_mock_response("ok"))
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["temperature"] == 0.1
        assert kwargs["top_p"] == 0.95
        system, user = kwargs["messages"]
        assert system == {"role": "system", "content": "system"}
        content = user["content"]
        assert content[0] == {
            "type": "image_url",
            "image_url": {"url": "data:image/jpeg;base64,QUJD"},
        }
        assert content[1]["type"] == "file"
        assert content[1]["file"]["file_data"] == "data:application/pdf;base64,REVG"
        assert content[2] == {"type": "text", "text": "check"}

    @pytest.mark.asyncio
    async def test_no_choices_is_success_without_text(self) -> None:
        response = MagicMock()
        response.choices = []
        outcome, _ = await _generate(return_value=response)
        assert outcome.ok
        assert outcome.text is None

    @pytest.mark.asyncio
    async def test_authentication_error(self) -> None:
        exc = openai.AuthenticationError("Incorrect API key", response=_response(401), body=None)
        outcome, _ = await _generate(side_effect=exc)
        assert outcome.failure == FailureKind.AUTHENTICATION

    @pytest.mark.asyncio
    async def test_model_not_found(self) -> None:
        exc = openai.NotFoundError("model does not exist", response=_response(404), body=None)
        outcome, _ = await _generate(side_effect=exc)
        assert outcome.failure == FailureKind.RESOURCE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_quota_exhausted_is_billing(self) -> None:
        exc = openai.RateLimitError(
            "You exceeded your current quota, please check your plan and billing details.",
            response=_response(429),
            body=None,
        )
        outcome, _ = await _generate(side_effect=exc)
        assert outcome.failure == FailureKind.BILLING

    @pytest.mark.asyncio
    async def test_plain_rate_limit_is_transport(self) -> None:
        exc = openai.RateLimitError("Rate limit reached", response=_response(429), body=None)
        outcome, _ = await _generate(side_effect=exc)
        assert outcome.failure == FailureKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_connection_error_is_transport(self) -> None:
        exc = openai.APIConnectionError(request=httpx.Request("POST", _URL))
        outcome, _ = await _generate(side_effect=exc)
        assert outcome.failure == FailureKind.TRANSPORT
        assert "network error" in outcome.detail

    @pytest.mark.asyncio
    async def test_timeout_is_transport(self) -> None:
        outcome, _ = await _generate(side_effect=httpx.TimeoutException("timeout"))
        assert outcome.failure == FailureKind.TRANSPORT
