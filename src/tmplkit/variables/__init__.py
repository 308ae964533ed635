"""Template variable definitions."""

from .definition import (
    EmptySelection,
    SequenceSelection,
    StringSelection,
    ValuesForSelection,
    VariableDef,
    parse_variable_def,
    parse_variable_defs,
    resolve_selection,
)

__all__ = [
    "EmptySelection",
    "SequenceSelection",
    "StringSelection",
    "ValuesForSelection",
    "VariableDef",
    "parse_variable_def",
    "parse_variable_defs",
    "resolve_selection",
]
