from typing import Any, Callable, List, Optional, Tuple

import pytest

from application.ports.address_lookup_port import AddressLookupPort
from application.use_cases.address_entry import AddressEntryUseCase
from infrastructure.repository_impl.address_book_repository import InMemoryAddressBookRepository

LOOKUP_URL = "http://lookup.test/api/getAddresses"


class FakeLookup(AddressLookupPort):
    """Lookup port returning a canned payload and recording every call."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None, base_url: Optional[str] = LOOKUP_URL):
        self.payload = payload if payload is not None else {"details": []}
        self.error = error
        self._base_url = base_url
        self.calls: List[Tuple[str, str]] = []
        self.on_fetch: Optional[Callable[[], None]] = None

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    def fetch_addresses(self, postcode: str, house_number: str) -> Any:
        self.calls.append((postcode, house_number))
        if self.on_fetch is not None:
            self.on_fetch()
        if self.error is not None:
            raise self.error
        return self.payload


def record(street="Main", city="X", postcode="1345", **extra):
    return {"street": street, "city": city, "postcode": postcode, **extra}


@pytest.fixture
def lookup():
    return FakeLookup(payload={"details": [record()]})


@pytest.fixture
def address_book():
    return InMemoryAddressBookRepository()


@pytest.fixture
def use_case(lookup, address_book):
    return AddressEntryUseCase(lookup=lookup, address_book=address_book)
