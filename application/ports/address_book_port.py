from abc import ABC, abstractmethod
from typing import List

from core_domain.entities.address import AddressBookEntry


class AddressBookPort(ABC):
    """
    Port for the persistent address book.
    """

    @abstractmethod
    def add_address(self, entry: AddressBookEntry) -> None:
        """Stores one entry. Storing an identical entry twice keeps a single copy."""
        pass

    @abstractmethod
    def remove_address(self, entry_id: str) -> None:
        pass

    @abstractmethod
    def list_addresses(self) -> List[AddressBookEntry]:
        pass
