"""Shared helpers."""

from .get_logger import get_logger
from .get_package_version import get_package_version

__all__ = ["get_logger", "get_package_version"]
