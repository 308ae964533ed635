"""Schema for the variables a template asks its user for.

A manifest entry looks like::

    - name: project_name
      ask: Name of the project
      default_value: my-project
      select_in_values: [a, b]   # or a plain string, or omitted

Unknown keys are rejected so that a typo in a manifest fails loudly instead
of being silently ignored.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_serializer, field_validator


class EmptySelection(BaseModel):
    """Any value is accepted."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SequenceSelection(BaseModel):
    """The value must be picked from an ordered list."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    values: Tuple[str, ...] = ()


class StringSelection(BaseModel):
    """A single encoded string of values, decoded by the consumer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str


ValuesForSelection = Union[EmptySelection, SequenceSelection, StringSelection]

_SELECTION_TYPES = (EmptySelection, SequenceSelection, StringSelection)


def resolve_selection(raw: Any) -> ValuesForSelection:
    """Map a raw manifest value onto a selection variant.

    Shapes are tried in order: nothing, list of strings, string. The first
    shape that matches wins.
    """
    if isinstance(raw, _SELECTION_TYPES):
        return raw
    if raw is None:
        return EmptySelection()
    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return SequenceSelection(values=tuple(raw))
    if isinstance(raw, str):
        return StringSelection(value=raw)
    raise ValueError(
        "select_in_values must be omitted, a list of strings or a string, "
        f"got {type(raw).__name__}"
    )


class VariableDef(BaseModel):
    """One variable collected before a template is rendered."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    default_value: Optional[Any] = None
    ask: Optional[str] = None
    # "yes" or 1 are rejected, only real booleans
    hidden: StrictBool = False
    select_in_values: ValuesForSelection = Field(default_factory=EmptySelection)

    @field_validator("select_in_values", mode="before")
    @classmethod
    def resolve_select_in_values(cls, value: Any) -> ValuesForSelection:
        return resolve_selection(value)

    @field_serializer("select_in_values")
    def dump_select_in_values(self, selection: ValuesForSelection) -> Union[None, List[str], str]:
        if isinstance(selection, SequenceSelection):
            return list(selection.values)
        if isinstance(selection, StringSelection):
            return selection.value
        return None

    @property
    def question(self) -> str:
        """Text shown when asking for the value; falls back to the name."""
        return self.ask if self.ask else self.name

    @property
    def choices(self) -> Optional[Tuple[str, ...]]:
        """Allowed values when the selection is a list, otherwise None."""
        if isinstance(self.select_in_values, SequenceSelection):
            return self.select_in_values.values
        return None

    def to_manifest(self) -> dict[str, Any]:
        """Dump back to the manifest shape."""
        return self.model_dump()


def parse_variable_def(data: Mapping[str, Any]) -> VariableDef:
    """Validate a single manifest entry."""
    return VariableDef.model_validate(data)


def parse_variable_defs(items: Iterable[Mapping[str, Any]]) -> List[VariableDef]:
    """Validate a list of manifest entries, keeping their order."""
    return [parse_variable_def(item) for item in items]
