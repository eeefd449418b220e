from dataclasses import dataclass
from enum import Enum


class Stage(str, Enum):
    """Audit stage selecting the checklist and the expected document set."""

    PRELIMINARY = "PRELIMINARY"
    FINAL = "FINAL"


@dataclass(frozen=True)
class StageProfile:
    title: str
    expected_documents: tuple[str, ...]
    post_analysis_hint: str | None = None


STAGE_PROFILES: dict[Stage, StageProfile] = {
    Stage.PRELIMINARY: StageProfile(
        title="Предварительный",
        expected_documents=(
            "Доверенность",
            "Заключение предварительной технической экспертизы",
        ),
    ),
    Stage.FINAL: StageProfile(
        title="Финальный аудит",
        expected_documents=(
            "Протокол проверки безопасности конструкции",
            "Разрешение на внесение изменений в конструкцию",
            "Документы на ГБО и доверенность",
        ),
        post_analysis_hint=(
            "Возьмите в руки бумажное заключение и сверьте с реальным расположением "
            "элементов на машине прямо сейчас. ГИБДД не прощает ошибок в сторонах "
            "установки (лево/право) и маркировках оборудования."
        ),
    ),
}


def stage_profile(stage: Stage) -> StageProfile:
    return STAGE_PROFILES[Stage(stage)]
