import time
from typing import Any, Dict, Optional

import requests
import structlog

from application.ports.address_lookup_port import AddressLookupPort
from core_domain.exceptions import FormatError, TransportError
from infrastructure.monitoring.metrics import (
    address_lookup_calls_total,
    address_lookup_duration_hist,
    address_lookup_errors_total,
)

log = structlog.get_logger(__name__)


class AddressAPIClient(AddressLookupPort):
    """
    Lookup endpoint client. Exactly one GET per call; retrying is left to the user.
    """

    DEFAULT_TIMEOUT = 30

    def __init__(self, base_url: Optional[str], timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self._base_url = base_url or None
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.log = log.bind(client="AddressAPIClient")

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def fetch_addresses(self, postcode: str, house_number: str) -> Any:
        if not self._base_url:
            # Callers check base_url first; this guards direct use.
            raise TransportError("Failed to fetch addresses")

        # requests URL-encodes the query values.
        params: Dict[str, str] = {"postcode": postcode, "streetnumber": house_number}
        request_log = self.log.bind(method="GET", params=params)

        start_time = time.monotonic()
        status_code = "none"
        try:
            request_log.debug("Making lookup request", url=self._base_url)
            response = self.session.get(self._base_url, params=params, timeout=self.timeout)
            status_code = str(response.status_code)
            address_lookup_calls_total.labels(status_code=status_code).inc()
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            snippet = e.response.text[:200] if e.response is not None else "N/A"
            address_lookup_errors_total.labels(error_type=f"http_{status_code}").inc()
            request_log.warning("Lookup request failed with HTTP error", status_code=status_code, response_text=snippet)
            raise TransportError("Failed to fetch addresses") from e
        except requests.exceptions.RequestException as e:
            address_lookup_errors_total.labels(error_type=type(e).__name__).inc()
            request_log.warning("Lookup request failed", error=str(e))
            raise TransportError("Failed to fetch addresses") from e
        finally:
            duration = time.monotonic() - start_time
            address_lookup_duration_hist.labels(status_code=status_code).observe(duration)

        try:
            payload = response.json()
        except ValueError as e:
            address_lookup_errors_total.labels(error_type="json_decode").inc()
            request_log.warning("Lookup response is not valid JSON", response_text=response.text[:200])
            raise FormatError("Invalid response format") from e

        request_log.debug("Lookup request successful", status_code=status_code, duration_sec=f"{duration:.3f}s")
        return payload
