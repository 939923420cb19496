import argparse
import asyncio
from pathlib import Path

from analysis_client.config.settings import Settings
from analysis_client.errors.classifier import classify_exception
from analysis_client.errors.exceptions import FileError
from analysis_client.logging.logger import Log
from analysis_client.orchestrator.models import RunOutcome
from analysis_client.orchestrator.session import AnalyzerSession, build_session
from analysis_client.validation.models import FileHandle


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="analysis-client",
        description="Run one analysis through the orchestration layer.",
    )
    parser.add_argument("--options", type=Path, help="file holding the analysis options text")
    parser.add_argument("--data", type=Path, help="csTimer data file (.txt)")
    parser.add_argument("--example", action="store_true", help="analyze the bundled example file")
    parser.add_argument("--locale", help="switch locale before running")
    return parser.parse_args(argv)


async def _run(session: AnalyzerSession, args: argparse.Namespace) -> int:
    await session.restore()
    if args.locale:
        await session.switch_locale(args.locale)
    if args.options is not None:
        session.edit_options(args.options.read_text(encoding="utf-8"))

    outcome: RunOutcome | None = None
    if args.example:
        outcome = await session.load_example()
    elif args.data is not None:
        try:
            handle = FileHandle.from_path(args.data)
        except FileError as exc:
            session.context.error = classify_exception(exc, session.locale.active_locale())
        else:
            outcome = await session.select_file(handle)

    if session.context.error is not None:
        print(session.context.error.message)
        return 1
    if outcome is not None:
        print(session.context.surface.markup)
    return 0


async def _main(args: argparse.Namespace) -> int:
    settings = Settings()
    Log.configure(settings.log_level)
    session = build_session(settings)
    try:
        return await _run(session, args)
    finally:
        await session.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> session -> restore -> optional run."""
    return asyncio.run(_main(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
