from .documenter import (
    DEFAULT_DESCRIPTION_FIELD,
    DEFAULT_INDENT,
    Documenter,
    document,
)
from .formatters import (
    BLOCK,
    INLINE,
    MARKDOWN,
    ContainerArgs,
    EntryArgs,
    FormatPreset,
    get_preset,
)

__all__ = [
    "DEFAULT_DESCRIPTION_FIELD",
    "DEFAULT_INDENT",
    "Documenter",
    "document",
    "BLOCK",
    "INLINE",
    "MARKDOWN",
    "ContainerArgs",
    "EntryArgs",
    "FormatPreset",
    "get_preset",
]
