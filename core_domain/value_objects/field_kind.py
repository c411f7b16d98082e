from dataclasses import dataclass
from enum import Enum
from typing import Union

FieldValue = Union[str, bool]


class FieldKind(Enum):
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"


@dataclass(frozen=True)
class InputEvent:
    """A change event coming from a form input."""
    kind: FieldKind = FieldKind.TEXT
    value: str = ""
    checked: bool = False

    @classmethod
    def text(cls, value: str) -> 'InputEvent':
        return cls(kind=FieldKind.TEXT, value=value)

    @classmethod
    def checkbox(cls, checked: bool) -> 'InputEvent':
        return cls(kind=FieldKind.CHECKBOX, checked=checked)

    @classmethod
    def radio(cls, value: str) -> 'InputEvent':
        return cls(kind=FieldKind.RADIO, value=value)
