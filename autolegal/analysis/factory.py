from typing import ClassVar

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.example_client_adapter import ExampleClientAdapter
from autolegal.analysis.gemini_client_adapter import GeminiClientAdapter
from autolegal.analysis.models import GenerationConfig
from autolegal.analysis.openai_client_adapter import OpenAIClientAdapter
from autolegal.analysis.orchestrator import AnalysisConfig, AnalysisOrchestrator
from autolegal.analysis.prompt_loader import PromptCatalog
from autolegal.config.settings import Settings


class ModelClientFactory:
    """Creates the configured model client adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseModelClient:
        provider = settings.analysis_provider.lower()
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=settings.api_key,
                timeout_seconds=settings.request_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.api_key,
                timeout_seconds=settings.request_timeout_seconds,
                base_url=(settings.openai_base_url or "").strip() or None,
            )
        if provider == "example":
            return ExampleClientAdapter()
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def resolve_model_name(cls, settings: Settings) -> str:
        provider = settings.analysis_provider.lower()
        if provider == "openai":
            return settings.openai_model_name
        if provider == "example":
            return "example"
        return settings.model_name


def build_analysis_config(settings: Settings) -> AnalysisConfig:
    """Snapshot the settings the orchestrator depends on."""
    api_key = settings.api_key
    if settings.analysis_provider.lower() == "example":
        api_key = api_key or "example"
    return AnalysisConfig(
        api_key=api_key,
        model=ModelClientFactory.resolve_model_name(settings),
        generation=GenerationConfig(
            temperature=settings.temperature,
            top_p=settings.top_p,
            thinking_budget=settings.thinking_budget,
        ),
    )


def build_orchestrator(settings: Settings) -> AnalysisOrchestrator:
    """Build an AnalysisOrchestrator with all required collaborators."""
    return AnalysisOrchestrator(
        client=ModelClientFactory.create(settings),
        config=build_analysis_config(settings),
        catalog=PromptCatalog.load(settings.prompts_dir),
    )
