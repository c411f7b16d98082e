import structlog

from application.services.workflow_state import WorkflowState

log = structlog.get_logger(__name__)


class ClearWorkflow:
    """Resets fields, result set and error in one step."""

    def __init__(self, state: WorkflowState):
        self.state = state

    def clear(self) -> None:
        state = self.state
        # No await between these assignments, so no other task can observe a partial reset.
        state.field_store.reset()
        state.addresses = ()
        state.failure = None
        state.generation += 1
        log.debug("Address entry cleared", generation=state.generation, busy=state.busy)
