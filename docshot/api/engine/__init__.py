"""Engine REST API domain."""

from .EngineClient import EngineClient

__all__ = ["EngineClient"]
