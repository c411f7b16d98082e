import structlog

from application.ports.address_book_port import AddressBookPort
from application.use_cases.address_entry import AddressEntryUseCase
from infrastructure.api_clients.address_api_client import AddressAPIClient
from infrastructure.config.settings import Settings, settings as default_settings
from infrastructure.repository_impl.address_book_repository import (
    InMemoryAddressBookRepository,
    RedisAddressBookRepository,
)

log = structlog.get_logger(__name__)

ADDRESS_BOOK_BACKENDS = ("memory", "redis")


def build_address_book(config: Settings) -> AddressBookPort:
    backend = (config.ADDRESS_BOOK_BACKEND or "memory").lower()
    if backend == "memory":
        return InMemoryAddressBookRepository()
    if backend == "redis":
        return RedisAddressBookRepository(config.REDIS_URL, key=config.ADDRESS_BOOK_KEY)
    raise ValueError(f"Unknown ADDRESS_BOOK_BACKEND '{backend}', expected one of {ADDRESS_BOOK_BACKENDS}")


def build_address_entry_use_case(config: Settings = default_settings) -> AddressEntryUseCase:
    """Wires the lookup client and the configured address book into the use case."""
    if not config.ADDRESS_API_URL:
        # Not fatal here: every search reports the missing URL to the user.
        log.warning("Address lookup URL is not configured")
    lookup = AddressAPIClient(config.ADDRESS_API_URL, timeout=config.ADDRESS_API_TIMEOUT)
    address_book = build_address_book(config)
    log.info("Address entry use case built", backend=type(address_book).__name__)
    return AddressEntryUseCase(lookup=lookup, address_book=address_book)
