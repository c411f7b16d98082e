from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from core_domain.entities.address import Address
from core_domain.exceptions import AddressEntryError
from core_domain.value_objects.field_kind import FieldValue
from application.services.field_store import FieldStore


@dataclass(frozen=True)
class WorkflowView:
    """Read-only snapshot handed to the rendering layer."""
    fields: Dict[str, FieldValue]
    addresses: Tuple[Address, ...]
    error: Optional[str]
    busy: bool


@dataclass
class WorkflowState:
    """
    State shared by the search, person assignment and clear workflows.
    Only those workflows mutate it.
    """
    field_store: FieldStore = field(default_factory=FieldStore)
    addresses: Tuple[Address, ...] = ()
    failure: Optional[AddressEntryError] = None
    busy: bool = False
    generation: int = 0

    @property
    def fields(self) -> Dict[str, FieldValue]:
        return self.field_store.fields

    @property
    def error(self) -> Optional[str]:
        return self.failure.message if self.failure is not None else None

    def view(self) -> WorkflowView:
        return WorkflowView(
            fields=self.fields,
            addresses=self.addresses,
            error=self.error,
            busy=self.busy,
        )
