"""CLI entry point."""

import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from common.constants import READ_ERRORS_LENIENT, READ_ERRORS_STRICT
from common.exceptions import TransferError
from common.logging_config import setup_logging
from cli.config import Config, default_config_path
from cli.constants import (
    ERROR_MESSAGE,
    HELP_TEXT,
    INVALID_CONFIG_MESSAGE,
    PROG_NAME,
    SUCCESS_MESSAGE,
    USAGE_TEXT,
)
from cli.models import HelpCommand
from cli.parser import ParseError, parse_args
from cli.utils import ProgressReporter
from transfer.runner import TransferRunner


def _describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


def _read_error_policy(command) -> Optional[str]:
    if command.lenient_reads:
        return READ_ERRORS_LENIENT
    if command.strict_reads:
        return READ_ERRORS_STRICT
    return None


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        command = parse_args(argv)
    except ParseError as e:
        print(ERROR_MESSAGE.format(error=e), file=sys.stderr)
        print(USAGE_TEXT.format(prog=PROG_NAME), file=sys.stderr)
        return 1

    if isinstance(command, HelpCommand):
        print(HELP_TEXT.format(prog=PROG_NAME))
        return 0

    log_level = 'DEBUG' if command.debug else None
    logger = setup_logging('cli', log_level=log_level)
    setup_logging('transfer', log_level=log_level)
    if command.debug:
        logger.info("Debug logging enabled")

    config_path = Path(command.config_path) if command.config_path else default_config_path()
    config = Config(config_path)

    try:
        settings = config.get_settings(
            host=command.host,
            port=command.port,
            chunk_size=command.chunk_size,
            timeout=command.timeout,
            read_errors=_read_error_policy(command),
        )
    except ValidationError as e:
        print(INVALID_CONFIG_MESSAGE.format(detail=_describe_validation_error(e)), file=sys.stderr)
        return 1

    reporter = ProgressReporter(command.file_path) if command.progress else None
    runner = TransferRunner(settings, on_chunk=reporter)

    logger.info(f"Sending {command.file_path} to {settings.target}")
    try:
        report = runner.run(command.file_path)
    except TransferError as e:
        if reporter is not None:
            reporter.finish()
        logger.debug(f"Transfer aborted after {e.bytes_sent} bytes", exc_info=True)
        print(ERROR_MESSAGE.format(error=e), file=sys.stderr)
        return 1

    if reporter is not None:
        reporter.finish()
    logger.info(f"Delivered {report.bytes_sent} bytes in {report.chunks_sent} chunk(s)")
    print(SUCCESS_MESSAGE.format(path=command.file_path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
