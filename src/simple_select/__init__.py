"""simple-select: a select list with a bidirectional "select all" control."""

from ._version import __version__
from .api import SimpleSelect
from .core.config import SelectConfig
from .core.controller import SelectionController
from .core.store import SelectionStore


__all__ = [
    "__version__",
    "SimpleSelect",
    "SelectConfig",
    "SelectionController",
    "SelectionStore",
]
