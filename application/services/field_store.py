from typing import Callable, Dict, Mapping

import structlog

from core_domain.value_objects.field_kind import FieldKind, FieldValue, InputEvent

log = structlog.get_logger(__name__)

POST_CODE = "postCode"
HOUSE_NUMBER = "houseNumber"
FIRST_NAME = "firstName"
LAST_NAME = "lastName"
SELECTED_ADDRESS_ID = "selectedAddressId"

ADDRESS_ENTRY_FIELDS: Dict[str, FieldValue] = {
    POST_CODE: "",
    HOUSE_NUMBER: "",
    FIRST_NAME: "",
    LAST_NAME: "",
    SELECTED_ADDRESS_ID: "",
}

# One update rule per input kind.
UPDATE_RULES: Dict[FieldKind, Callable[[InputEvent], FieldValue]] = {
    FieldKind.CHECKBOX: lambda event: bool(event.checked),
    FieldKind.RADIO: lambda event: event.value,
    FieldKind.TEXT: lambda event: event.value,
}


class FieldStore:
    """
    Keyed state for form inputs. Holds no validation: every change is applied
    as-is and only the named field is replaced.
    """

    def __init__(self, initial_values: Mapping[str, FieldValue] = ADDRESS_ENTRY_FIELDS):
        if not initial_values:
            raise ValueError("FieldStore requires at least one field.")
        self._initial: Dict[str, FieldValue] = dict(initial_values)
        self._fields: Dict[str, FieldValue] = dict(initial_values)
        self.log = log.bind(service="FieldStore")

    @property
    def fields(self) -> Dict[str, FieldValue]:
        return dict(self._fields)

    @property
    def initial_values(self) -> Dict[str, FieldValue]:
        return dict(self._initial)

    def get(self, field_name: str) -> FieldValue:
        return self._fields[field_name]

    def apply_change(self, field_name: str, event: InputEvent) -> Dict[str, FieldValue]:
        if field_name not in self._fields:
            raise KeyError(f"Unknown form field: {field_name}")
        new_value = UPDATE_RULES[event.kind](event)
        self._fields = {**self._fields, field_name: new_value}
        self.log.debug("Field changed", field=field_name, kind=event.kind.value)
        return self.fields

    def reset(self) -> Dict[str, FieldValue]:
        self._fields = dict(self._initial)
        return self.fields
