from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


@dataclass(frozen=True)
class InlineDataPart:
    """Binary evidence sent inline: base64 payload plus its MIME type."""

    data: str
    mime_type: str


@dataclass(frozen=True)
class TextPart:
    """Instruction text closing the request."""

    text: str


RequestPart = InlineDataPart | TextPart


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters tuned for literal, checklist-style audits."""

    temperature: float = 0.1
    top_p: float = 0.95
    thinking_budget: int = 32000


@dataclass(frozen=True)
class AnalysisRequest:
    """One fully assembled model request. Built fresh for every call."""

    model: str
    parts: tuple[RequestPart, ...]
    system_instruction: str
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    @property
    def inline_parts(self) -> tuple[InlineDataPart, ...]:
        return tuple(p for p in self.parts if isinstance(p, InlineDataPart))

    @property
    def instruction(self) -> str:
        last = self.parts[-1]
        if not isinstance(last, TextPart):
            raise ValueError("AnalysisRequest must end with a text part")
        return last.text


class FailureKind(str, Enum):
    """Failure classes a model client can report."""

    AUTHENTICATION = "authentication"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    BILLING = "billing"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class ModelOutcome:
    """Structured result of one model call: text on success, a kind on failure."""

    text: str | None = None
    failure: FailureKind | None = None
    detail: str = ""

    @classmethod
    def succeeded(cls, text: str | None) -> "ModelOutcome":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, detail: str) -> "ModelOutcome":
        return cls(failure=kind, detail=detail)

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class AnalysisResult:
    """A completed audit shown to the user."""

    text: str
    produced_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def report_id(self) -> int:
        return int(self.produced_at.timestamp())
