"""State of one user's audit: stage, staged files, gating and last outcome."""

from collections.abc import Sequence

from autolegal.analysis.exceptions import AnalysisError
from autolegal.analysis.models import AnalysisResult
from autolegal.analysis.orchestrator import AnalysisOrchestrator
from autolegal.analysis.stages import Stage, stage_profile
from autolegal.ingestion.encoder import FileEncoder
from autolegal.ingestion.exceptions import EncodingError
from autolegal.ingestion.file_handles import FileHandle
from autolegal.ingestion.models import EncodedFile
from autolegal.logging.logger import Log
from autolegal.session.exceptions import (
    AcknowledgmentRequiredError,
    AnalysisInProgressError,
    MissingDocumentsError,
)

MISSING_DOCUMENTS_MESSAGE = "Пожалуйста, загрузите документы для анализа"
ACKNOWLEDGMENT_MESSAGE = (
    "Подтвердите, что автомобиль проверен по VIN/ГРЗ в базах ГИБДД и ФССП "
    "и на нем нет запретов, арестов и неоплаченных штрафов."
)
IN_PROGRESS_MESSAGE = "Эксперт уже изучает документы. Дождитесь завершения анализа."


class AuditSession:
    """Caller of the orchestrator for a single user session.

    Overlapping analyses are rejected while one is outstanding. The
    orchestrator only ever receives an immutable snapshot of the staged files.
    """

    def __init__(
        self,
        orchestrator: AnalysisOrchestrator,
        encoder: FileEncoder,
        stage: Stage = Stage.PRELIMINARY,
    ) -> None:
        self._orchestrator = orchestrator
        self._encoder = encoder
        self._stage = Stage(stage)
        self._files: list[EncodedFile] = []
        self._acknowledged = False
        self._analyzing = False
        self.result: AnalysisResult | None = None
        self.error: str | None = None

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def files(self) -> tuple[EncodedFile, ...]:
        return tuple(self._files)

    @property
    def acknowledged(self) -> bool:
        return self._acknowledged

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing

    @property
    def can_analyze(self) -> bool:
        return bool(self._files) and self._acknowledged and not self._analyzing

    @property
    def post_analysis_hint(self) -> str | None:
        if self.result is None:
            return None
        return stage_profile(self._stage).post_analysis_hint

    def select_stage(self, stage: Stage) -> None:
        self._stage = Stage(stage)

    def acknowledge(self, confirmed: bool = True) -> None:
        self._acknowledged = confirmed

    async def add_files(self, handles: Sequence[FileHandle]) -> list[EncodingError]:
        """Encode a selection batch and append it after the already staged files."""
        batch = await self._encoder.encode_batch(handles)
        self._files.extend(batch.files)
        self.error = None
        return batch.errors

    def add_encoded(self, files: Sequence[EncodedFile]) -> None:
        self._files.extend(files)
        self.error = None

    def remove_file(self, index: int) -> EncodedFile:
        return self._files.pop(index)

    def clear_files(self) -> None:
        self._files.clear()

    async def run_analysis(self) -> AnalysisResult:
        """Check the preconditions, then run one audit of the staged files.

        Raises:
            MissingDocumentsError: if nothing is staged.
            AcknowledgmentRequiredError: if restrictions were not confirmed.
            AnalysisInProgressError: if an analysis is already running.
            AnalysisError: if the audit itself failed.
        """
        if not self._files:
            self.error = MISSING_DOCUMENTS_MESSAGE
            raise MissingDocumentsError(MISSING_DOCUMENTS_MESSAGE)
        if not self._acknowledged:
            raise AcknowledgmentRequiredError(ACKNOWLEDGMENT_MESSAGE)
        if self._analyzing:
            raise AnalysisInProgressError(IN_PROGRESS_MESSAGE)

        snapshot = tuple(self._files)
        stage = self._stage
        self._analyzing = True
        self.result = None
        self.error = None
        try:
            text = await self._orchestrator.analyze(snapshot, stage)
        except AnalysisError as exc:
            self.error = exc.message
            Log.warning(f"Analysis failed ({exc.kind})")
            raise
        finally:
            self._analyzing = False

        self.result = AnalysisResult(text=text)
        return self.result
