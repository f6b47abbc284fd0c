"""Configuration domain."""

from .DocsConfig import DocsConfig
from .DocshotConfig import DocshotConfig
from .EngineConfig import EngineConfig

__all__ = ["DocsConfig", "DocshotConfig", "EngineConfig"]
