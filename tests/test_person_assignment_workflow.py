import pytest

from application.mappers.address_mapper import transform_address
from application.services.field_store import FIRST_NAME, LAST_NAME, SELECTED_ADDRESS_ID
from application.services.person_assignment_workflow import PersonAssignmentWorkflow
from application.services.workflow_state import WorkflowState
from core_domain.exceptions import NotFoundError, SelectionError, ValidationError
from core_domain.value_objects.field_kind import InputEvent
from tests.conftest import record


@pytest.fixture
def state():
    state = WorkflowState()
    state.addresses = (
        transform_address(record(), "350"),
        transform_address(record(street="Side"), "350"),
    )
    return state


def fill(state, selected="", first="Ada", last="Lovelace"):
    store = state.field_store
    store.apply_change(SELECTED_ADDRESS_ID, InputEvent.radio(selected))
    store.apply_change(FIRST_NAME, InputEvent.text(first))
    store.apply_change(LAST_NAME, InputEvent.text(last))


def test_builds_entry_for_selected_address(state):
    fill(state, selected=state.addresses[1].id)

    entry = PersonAssignmentWorkflow(state).submit_person()

    assert entry.address is state.addresses[1]
    assert entry.to_dict()["street"] == "Side"
    assert (entry.first_name, entry.last_name) == ("Ada", "Lovelace")
    assert state.error is None


def test_names_are_stored_as_typed(state):
    fill(state, selected=state.addresses[0].id, first=" Ada ", last="Lovelace ")

    entry = PersonAssignmentWorkflow(state).submit_person()

    assert (entry.first_name, entry.last_name) == (" Ada ", "Lovelace ")


def test_blank_selection_fails(state):
    fill(state, selected="  ")

    assert PersonAssignmentWorkflow(state).submit_person() is None
    assert isinstance(state.failure, SelectionError)
    assert state.error == "No address selected, try to select an address or find one if you haven't"


def test_empty_result_set_fails_even_with_selection():
    state = WorkflowState()
    fill(state, selected="abc")

    PersonAssignmentWorkflow(state).submit_person()

    assert state.error == "No address selected, try to select an address or find one if you haven't"


def test_unknown_selection_fails(state):
    fill(state, selected="not-a-known-id")

    PersonAssignmentWorkflow(state).submit_person()

    assert isinstance(state.failure, SelectionError)
    assert state.error == "Selected address not found"


@pytest.mark.parametrize("first, last", [("", "Lovelace"), ("Ada", "   "), ("", "")])
def test_blank_names_fail_and_keep_results_and_selection(state, first, last):
    selected = state.addresses[1].id
    addresses = state.addresses
    fill(state, selected=selected, first=first, last=last)

    assert PersonAssignmentWorkflow(state).submit_person() is None

    assert isinstance(state.failure, ValidationError)
    assert state.error == "First name and last name fields mandatory!"
    assert state.addresses == addresses
    assert state.fields[SELECTED_ADDRESS_ID] == selected


def test_previous_error_is_cleared(state):
    state.failure = NotFoundError("No addresses found for the given postcode and house number")
    fill(state, selected=state.addresses[0].id)

    PersonAssignmentWorkflow(state).submit_person()

    assert state.error is None
