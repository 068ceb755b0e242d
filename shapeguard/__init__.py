# Package exports
from shapeguard.config import Settings, get_settings
from shapeguard.logging import configure_logging, get_logger, validation_logger
from shapeguard.errors import Result, Ok, Err
from shapeguard.validation import *  # noqa: F401,F403
from shapeguard.validation import __all__ as _validation_all

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "validation_logger",
    "Result",
    "Ok",
    "Err",
    *_validation_all,
]
