from typing import Optional

import structlog

from application.services.field_store import FIRST_NAME, LAST_NAME, SELECTED_ADDRESS_ID
from application.services.workflow_state import WorkflowState
from application.utils.field_utils import is_blank
from core_domain.entities.address import AddressBookEntry
from core_domain.exceptions import AddressEntryError, SelectionError, ValidationError
from infrastructure.monitoring.metrics import workflow_failures_total

log = structlog.get_logger(__name__)


class PersonAssignmentWorkflow:
    """
    Combines the selected candidate with the person's names. A failure leaves
    the result set and the selection untouched.
    """

    def __init__(self, state: WorkflowState):
        self.state = state
        self.log = log.bind(service="PersonAssignmentWorkflow")

    def submit_person(self) -> Optional[AddressBookEntry]:
        self.state.failure = None
        try:
            entry = self._build_entry()
        except AddressEntryError as e:
            self.state.failure = e
            workflow_failures_total.labels(workflow="person", error_type=e.error_type).inc()
            self.log.warning("Person assignment failed", error_type=e.error_type, error=str(e))
            return None
        self.log.info("Person assigned to address", address_id=entry.address.id)
        return entry

    def _build_entry(self) -> AddressBookEntry:
        fields = self.state.fields
        selected_id = fields.get(SELECTED_ADDRESS_ID)
        addresses = self.state.addresses

        if is_blank(selected_id) or not addresses:
            raise SelectionError(
                "No address selected, try to select an address or find one if you haven't"
            )

        found = next((address for address in addresses if address.id == selected_id), None)
        if found is None:
            raise SelectionError("Selected address not found")

        first_name = fields.get(FIRST_NAME)
        last_name = fields.get(LAST_NAME)
        if is_blank(first_name) or is_blank(last_name):
            raise ValidationError("First name and last name fields mandatory!")

        # Names are stored as typed; trimming only decides blankness.
        return AddressBookEntry(address=found, first_name=first_name, last_name=last_name)
