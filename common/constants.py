"""Project-wide constants (default target, chunk size, env var names)."""

DEFAULT_TARGET_HOST: str = "192.168.1.205"
DEFAULT_TARGET_PORT: int = 3333

CHUNK_SIZE_BYTES: int = 1024
MAX_CHUNK_SIZE_BYTES: int = 64 * 1024 * 1024

MAX_TIMEOUT_SECONDS: float = 24 * 60 * 60

READ_ERRORS_STRICT = "strict"
READ_ERRORS_LENIENT = "lenient"

ENV_TARGET_HOST = "OTA_TARGET_HOST"
ENV_TARGET_PORT = "OTA_TARGET_PORT"
ENV_CONFIG_PATH = "OTA_CONFIG_PATH"
ENV_LOG_LEVEL = "LOG_LEVEL"

CONFIG_DIR_NAME = ".ota-sender"
CONFIG_FILE_NAME = "config.json"
