import asyncio
from typing import Any, List, Optional

import structlog

from application.mappers.address_mapper import transform_address
from application.ports.address_lookup_port import AddressLookupPort
from application.services.field_store import HOUSE_NUMBER, POST_CODE
from application.services.workflow_state import WorkflowState
from application.utils.field_utils import is_blank
from core_domain.entities.address import Address
from core_domain.exceptions import (
    AddressEntryError,
    ConfigurationError,
    FormatError,
    NotFoundError,
    SearchInProgressError,
    ValidationError,
)
from infrastructure.monitoring.metrics import address_searches_total, workflow_failures_total

log = structlog.get_logger(__name__)

RESULTS_FIELD = "details"


def extract_raw_records(payload: Any) -> List[Any]:
    """Pulls the raw record sequence out of a decoded lookup response."""
    details = payload.get(RESULTS_FIELD) if isinstance(payload, dict) else None
    # A missing, null or otherwise empty results field is a shape problem;
    # an empty list is a valid "nothing found" answer.
    if details is None or (not isinstance(details, list) and not details):
        raise FormatError("Invalid response format")
    if not isinstance(details, list):
        raise FormatError("Addresses should be an array")
    return details


class AddressSearchWorkflow:
    """
    Validates the search fields, queries the lookup port and replaces the
    result set with the transformed candidates.
    """

    def __init__(self, lookup: AddressLookupPort, state: WorkflowState):
        self.lookup = lookup
        self.state = state
        self.log = log.bind(service="AddressSearchWorkflow")

    async def submit_search(self) -> Optional[List[Address]]:
        """
        Runs one search. Returns the new result set, or None when the search
        failed; the failure message is then available on the workflow state.
        """
        if self.state.busy:
            raise SearchInProgressError()

        self.state.failure = None
        self.state.addresses = ()
        generation = self.state.generation

        try:
            addresses = await self._search()
        except AddressEntryError as e:
            if generation != self.state.generation:
                self.log.info("Discarding failure of a search that was cleared", error=str(e))
                return None
            self.state.failure = e
            self.state.addresses = ()
            workflow_failures_total.labels(workflow="search", error_type=e.error_type).inc()
            self.log.warning("Address search failed", error_type=e.error_type, error=str(e))
            return None

        if generation != self.state.generation:
            self.log.info("Discarding results of a search that was cleared", count=len(addresses))
            return None

        self.state.addresses = tuple(addresses)
        self.state.failure = None
        address_searches_total.inc()
        self.log.info("Address search succeeded", count=len(addresses))
        return addresses

    async def _search(self) -> List[Address]:
        if not self.lookup.base_url:
            raise ConfigurationError("BASE API URL is not defined")

        fields = self.state.fields
        postcode = fields.get(POST_CODE)
        house_number = fields.get(HOUSE_NUMBER)
        if is_blank(postcode) or is_blank(house_number):
            raise ValidationError("Post code and house number are mandatory fields")

        self.state.busy = True
        try:
            self.log.debug("Fetching addresses", postcode=postcode, house_number=house_number)
            payload = await asyncio.to_thread(self.lookup.fetch_addresses, postcode, house_number)
        finally:
            self.state.busy = False

        raw_records = extract_raw_records(payload)
        if not raw_records:
            raise NotFoundError("No addresses found for the given postcode and house number")

        return [transform_address(record, house_number) for record in raw_records]
