"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result of a ``cmd_*`` function.

    ``announce`` is shown before any work starts. ``progress_callback`` is a
    generator yielding ``(fraction, message)`` pairs; by the time it is
    exhausted it must have filled ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
