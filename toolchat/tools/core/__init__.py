from .errors import DuplicateToolNameError, ToolConfigurationError, UnknownToolError
from .types import ERROR_LABEL, ToolError, ToolOutcome, ToolSuccess

__all__ = [
    "ERROR_LABEL",
    "DuplicateToolNameError",
    "ToolConfigurationError",
    "ToolError",
    "ToolOutcome",
    "ToolSuccess",
    "UnknownToolError",
]
