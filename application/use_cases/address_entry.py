from typing import Dict, List, Optional

import structlog

from application.ports.address_book_port import AddressBookPort
from application.ports.address_lookup_port import AddressLookupPort
from application.services.address_search_workflow import AddressSearchWorkflow
from application.services.clear_workflow import ClearWorkflow
from application.services.field_store import FieldStore
from application.services.person_assignment_workflow import PersonAssignmentWorkflow
from application.services.workflow_state import WorkflowState, WorkflowView
from core_domain.entities.address import Address, AddressBookEntry
from core_domain.value_objects.field_kind import FieldValue, InputEvent

log = structlog.get_logger(__name__)


class AddressEntryUseCase:
    """
    Entry point for the rendering layer: dispatches field changes and the
    search, person and clear actions, and exposes the current state.
    """

    def __init__(self, lookup: AddressLookupPort, address_book: AddressBookPort, field_store: Optional[FieldStore] = None):
        self.state = WorkflowState(field_store=field_store or FieldStore())
        self.address_book = address_book
        self.search_workflow = AddressSearchWorkflow(lookup, self.state)
        self.person_workflow = PersonAssignmentWorkflow(self.state)
        self.clear_workflow = ClearWorkflow(self.state)
        self.log = log.bind(service="AddressEntryUseCase")

    def handle_change(self, field_name: str, event: InputEvent) -> Dict[str, FieldValue]:
        return self.state.field_store.apply_change(field_name, event)

    async def submit_search(self) -> Optional[List[Address]]:
        return await self.search_workflow.submit_search()

    def submit_person(self) -> Optional[AddressBookEntry]:
        """Builds the entry and hands it to the address book. None on failure."""
        entry = self.person_workflow.submit_person()
        if entry is not None:
            self.address_book.add_address(entry)
        return entry

    def clear(self) -> None:
        self.clear_workflow.clear()

    def view(self) -> WorkflowView:
        return self.state.view()

    def saved_addresses(self) -> List[AddressBookEntry]:
        return self.address_book.list_addresses()

    def remove_saved_address(self, entry_id: str) -> None:
        self.address_book.remove_address(entry_id)
