"""
Configuration management with typed Pydantic models.

Configuration is only read when a caller asks for it; the library
works with defaults otherwise.
"""

from cells.config.loader import load_config
from cells.config.settings import CellsConfig, LoggingConfig, OrderPolicy

__all__ = [
    "CellsConfig",
    "LoggingConfig",
    "OrderPolicy",
    "load_config",
]
