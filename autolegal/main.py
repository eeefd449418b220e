import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from autolegal.analysis.exceptions import AnalysisError
from autolegal.analysis.factory import build_orchestrator
from autolegal.analysis.stages import Stage
from autolegal.config.settings import Settings
from autolegal.ingestion.encoder import FileEncoder
from autolegal.ingestion.file_handles import LocalFile
from autolegal.logging.logger import Log
from autolegal.session.audit_session import AuditSession
from autolegal.session.exceptions import SessionError


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="autolegal",
        description="Audit vehicle modification documents with a generative model.",
    )
    parser.add_argument(
        "--stage",
        choices=[stage.value for stage in Stage],
        default=Stage.PRELIMINARY.value,
    )
    parser.add_argument(
        "--confirm-no-restrictions",
        action="store_true",
        help="confirm the vehicle was checked for bans, arrests and unpaid fines",
    )
    parser.add_argument("files", nargs="*", type=Path, help="photos or PDFs to audit")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Stage the files, run one audit and print the outcome."""
    session = AuditSession(
        orchestrator=build_orchestrator(settings),
        encoder=FileEncoder(max_file_size_bytes=settings.max_file_size_bytes),
        stage=Stage(args.stage),
    )
    session.acknowledge(args.confirm_no_restrictions)

    for error in await session.add_files([LocalFile(path) for path in args.files]):
        print(error.message, file=sys.stderr)

    try:
        result = await session.run_analysis()
    except (SessionError, AnalysisError) as exc:
        print(exc.message, file=sys.stderr)
        return 1

    print(result.text)
    if session.post_analysis_hint:
        print()
        print(session.post_analysis_hint)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run the audit."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
