"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
ENV_PREFIX: Final = "FIELDRULES_"
DEFAULT_BYTE_ENCODING: Final = "utf-8"
DEFAULT_LOG_DIR: Final = "logs"
LOG_FILE_NAME: Final = "fieldrules.log"
