"""CLI constants and operator-facing messages."""

PROG_NAME = "ota-send"

GREEN = "\033[32m"
RESET = "\033[0m"

USAGE_TEXT = "Usage: {prog} [options] <file_path>"

HELP_TEXT = """Usage: {prog} [options] <file_path>

Stream a firmware image to a device over a raw TCP connection.

Options:
  --host HOST            Target address (config: target_host)
  --port PORT            Target TCP port (config: target_port)
  --chunk-size BYTES     Bytes per read/write cycle (config: chunk_size)
  --timeout SECONDS      Connect and send timeout; waits forever if unset
  --lenient-reads        Stop quietly on file read errors instead of failing
  --strict-reads         Fail on file read errors even if the config says lenient
  --config PATH          Config file (default ~/.ota-sender/config.json)
  --progress             Show transfer progress on stderr
  --debug                Enable debug logging
  -h, --help             Show this help

Examples:
  {prog} build/firmware.bin
  {prog} --host 10.0.0.7 --port 3333 --progress build/firmware.bin"""

SUCCESS_MESSAGE = "File {path} sent successfully"
ERROR_MESSAGE = "Error: {error}"
INVALID_CONFIG_MESSAGE = "Error: Invalid configuration - {detail}"
