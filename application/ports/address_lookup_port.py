from abc import ABC, abstractmethod
from typing import Any, Optional


class AddressLookupPort(ABC):
    """
    Port for the remote address lookup endpoint.
    """

    @property
    @abstractmethod
    def base_url(self) -> Optional[str]:
        """Endpoint the lookup is issued against; None when not configured."""
        pass

    @abstractmethod
    def fetch_addresses(self, postcode: str, house_number: str) -> Any:
        """
        Issues a single lookup and returns the decoded response body.
        Raises TransportError on network failure or non-2xx status and
        FormatError when the body cannot be decoded.
        """
        pass
