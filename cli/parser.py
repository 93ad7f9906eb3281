"""Command-line argument parser for the sender."""

from cli.models import CommandRequest, HelpCommand, SendCommand


class ParseError(Exception):
    """Raised when command-line parsing fails."""

    pass


VALUE_OPTIONS = {
    "--host": "host",
    "--port": "port",
    "--chunk-size": "chunk_size",
    "--timeout": "timeout",
    "--config": "config_path",
}

FLAG_OPTIONS = {
    "--lenient-reads": "lenient_reads",
    "--strict-reads": "strict_reads",
    "--progress": "progress",
    "--debug": "debug",
}

HELP_OPTIONS = ("-h", "--help")


def parse_args(argv: list[str]) -> CommandRequest:
    """Parse command-line arguments into a CommandRequest object.

    Args:
        argv: Arguments without the program name

    Returns:
        HelpCommand if help was requested, otherwise SendCommand

    Raises:
        ParseError: If an option is unknown, lacks a value, or the number
            of file arguments is not exactly one
    """
    options: dict = {}
    positionals: list[str] = []

    tokens = list(argv)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token == "--":
            positionals.extend(tokens[index:])
            break

        if token in HELP_OPTIONS:
            return HelpCommand()

        if not token.startswith("-") or token == "-":
            positionals.append(token)
            continue

        name, separator, inline_value = token.partition("=")

        if name in FLAG_OPTIONS:
            if separator:
                raise ParseError(f"{name} does not take a value")
            options[FLAG_OPTIONS[name]] = True
        elif name in VALUE_OPTIONS:
            if separator:
                value = inline_value
            elif index < len(tokens):
                value = tokens[index]
                index += 1
            else:
                raise ParseError(f"{name} requires a value")
            options[VALUE_OPTIONS[name]] = _convert(name, value)
        else:
            raise ParseError(f"Unknown option: {name}")

    if options.get("lenient_reads") and options.get("strict_reads"):
        raise ParseError("--lenient-reads and --strict-reads cannot be combined")

    if len(positionals) != 1:
        raise ParseError(f"expected exactly one firmware file, got {len(positionals)}")

    return SendCommand(file_path=positionals[0], **options)


def _convert(name: str, value: str) -> object:
    """Convert an option value to its type; range checks happen in TransferSettings."""
    try:
        if name in ("--port", "--chunk-size"):
            return int(value)
        if name == "--timeout":
            return float(value)
    except ValueError:
        raise ParseError(f"Invalid value for {name}: {value!r}")
    if not value:
        raise ParseError(f"{name} requires a value")
    return value
