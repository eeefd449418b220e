from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from autolegal.analysis.exceptions import PromptLoadError
from autolegal.analysis.stages import Stage

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_INSTRUCTION_FILE = "system_instruction.txt"
PRELIMINARY_TEMPLATE_FILE = "preliminary.txt"
FINAL_TEMPLATE_FILE = "final.txt"


def load_prompt(name: str, prompts_dir: Path | None = None) -> str:
    """Load one prompt file.

    Args:
        name: File name inside the prompts directory.
        prompts_dir: Directory to read from. Defaults to the bundled prompts.

    Returns:
        The prompt text with surrounding whitespace stripped.

    Raises:
        PromptLoadError: if the file cannot be read or is empty.
    """
    path = (prompts_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt '{name}': {exc}") from exc
    if not text:
        raise PromptLoadError(f"Prompt '{name}' is empty")
    return text


@dataclass(frozen=True)
class PromptCatalog:
    """System instruction plus one instruction template per stage."""

    system_instruction: str
    preliminary_template: str
    final_template: str

    @classmethod
    def load(cls, prompts_dir: Path | None = None) -> "PromptCatalog":
        return cls(
            system_instruction=load_prompt(SYSTEM_INSTRUCTION_FILE, prompts_dir),
            preliminary_template=load_prompt(PRELIMINARY_TEMPLATE_FILE, prompts_dir),
            final_template=load_prompt(FINAL_TEMPLATE_FILE, prompts_dir),
        )

    def resolve_template(self, stage: Stage) -> str:
        match stage:
            case Stage.PRELIMINARY:
                return self.preliminary_template
            case Stage.FINAL:
                return self.final_template
            case _:
                assert_never(stage)
