from mcpathgen.common.config import (
    PROJECT_NAME,
    DEFAULT_RANDOM_SEED,
    DEFAULT_GENERATION_SCHEME,
    LOG_LEVEL,
)
from mcpathgen.common.logging_config import setup_logging

__all__ = [
    "PROJECT_NAME",
    "DEFAULT_RANDOM_SEED",
    "DEFAULT_GENERATION_SCHEME",
    "LOG_LEVEL",
    "setup_logging",
]
