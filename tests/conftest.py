import pytest

from autolegal.analysis.client_base import BaseModelClient
from autolegal.analysis.models import AnalysisRequest, ModelOutcome
from autolegal.analysis.orchestrator import AnalysisConfig, AnalysisOrchestrator
from autolegal.analysis.prompt_loader import PromptCatalog
from autolegal.ingestion.models import EncodedFile


class FakeModelClient(BaseModelClient):
    """Returns scripted outcomes and records every request it receives."""

    def __init__(self, *outcomes: ModelOutcome) -> None:
        self._outcomes = list(outcomes) or [ModelOutcome.succeeded("OK: compliant")]
        self.requests: list[AnalysisRequest] = []

    async def generate(self, request: AnalysisRequest) -> ModelOutcome:
        self.requests.append(request)
        if len(self._outcomes) > 1:
            return self._outcomes.pop(0)
        return self._outcomes[0]


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """A 10-byte payload starting with the JPEG magic number."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF"


@pytest.fixture()
def pdf_bytes() -> bytes:
    return b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n"


@pytest.fixture()
def catalog() -> PromptCatalog:
    return PromptCatalog(
        system_instruction="SYSTEM",
        preliminary_template="TEMPLATE A",
        final_template="TEMPLATE B",
    )


@pytest.fixture()
def analysis_config() -> AnalysisConfig:
    return AnalysisConfig(api_key="test-key", model="gemini-3-pro-preview")


@pytest.fixture()
def fake_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture()
def orchestrator(
    fake_client: FakeModelClient,
    analysis_config: AnalysisConfig,
    catalog: PromptCatalog,
) -> AnalysisOrchestrator:
    return AnalysisOrchestrator(client=fake_client, config=analysis_config, catalog=catalog)


@pytest.fixture()
def encoded_files() -> list[EncodedFile]:
    return [
        EncodedFile(name="poa.jpg", content="AAAA", media_type="image/jpeg"),
        EncodedFile(name="conclusion.pdf", content="BBBB", media_type="application/pdf"),
        EncodedFile(name="scan.png", content="CCCC", media_type="image/png"),
    ]


@pytest.fixture()
def make_client() -> type[FakeModelClient]:
    """The fake client class, for tests that script their own outcomes."""
    return FakeModelClient
