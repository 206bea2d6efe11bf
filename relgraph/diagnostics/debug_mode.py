"""Debug-mode switch for relgraph algorithms.

Debug mode is a process-wide flag read by the traversal code. While it is
on, ``depth_first_search`` reports every edge it classifies on the
``relgraph.traversal`` logger, one DEBUG record per edge::

    q -> s : tree edge
    w -> s : back edge

The records only show up if that logger is at DEBUG level as well (see
``relgraph.logging.set_log_level``). The flag starts from the
``RELGRAPH_DEBUG`` environment variable and can be changed at runtime.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

ENV_VAR = "RELGRAPH_DEBUG"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


_debug_enabled: bool = _flag_from_env(os.environ.get(ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True while edge-classification tracing is switched on."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Switch edge-classification tracing on or off for the whole process.

    Args:
        enabled: New state of the flag; coerced with ``bool``.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set debug mode for the duration of a ``with`` block.

    The previous state is restored on exit, also when the block raises, so
    contexts can be nested.

    Example:
        >>> set_log_level("DEBUG")
        >>> with debug_context():
        ...     result = graph.depth_first_search()
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
