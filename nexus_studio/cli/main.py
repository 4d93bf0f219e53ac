"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, Tuple

from nexus_studio.domain.exceptions import BusinessError, PrerequisiteError

MIN_PYTHON: Tuple[int, int] = (3, 10)


def check_prerequisites(version_info: Sequence[int] = tuple(sys.version_info)) -> None:
    if tuple(version_info[:2]) < MIN_PYTHON:
        found = ".".join(str(p) for p in version_info[:3])
        raise PrerequisiteError(
            code="PYTHON_TOO_OLD",
            message=f"Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]}+ is required, found {found}",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexus-studio",
        description="Nexus Studio AI - interactive app builder with template-driven code generation",
    )
    parser.add_argument("-c", "--config", help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug-level logging")
    parser.add_argument("--no-animation", action="store_true", help="disable progress and typing delays")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        check_prerequisites()
    except PrerequisiteError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    # 前置检查通过后再导入其余模块
    from nexus_studio.cli.app import NexusApp
    from nexus_studio.config.settings import load_settings
    from nexus_studio.infrastructure.logging.logger import setup_logger
    from nexus_studio.ui.console import ConsoleUI

    try:
        settings = load_settings(args.config)
    except BusinessError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    if args.no_animation:
        settings = settings.model_copy(update={"typing_delay": 0.0, "step_delay": 0.0})
    setup_logger(settings, verbose=args.verbose)

    ui = ConsoleUI(typing_delay=settings.typing_delay, step_delay=settings.step_delay)
    try:
        return NexusApp(settings, ui).run()
    except KeyboardInterrupt:
        ui.info("\nInterrupted.")
        return 130
    except EOFError:
        ui.info("\nBye.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
