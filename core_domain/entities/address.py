from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from core_domain.value_objects.identifiers import AddressId


@dataclass(frozen=True)
class Address:
    """
    Canonical address built from a lookup record plus the searched house number.
    Entity identity is defined by `id`.
    """
    id: str
    house_number: str
    street: str
    city: str
    postcode: str
    lat: Optional[float] = None
    long: Optional[float] = None
    extras: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Freeze provider-specific fields together with the entity.
        object.__setattr__(self, 'extras', MappingProxyType(dict(self.extras)))

    def to_dict(self) -> Dict[str, Any]:
        record = dict(self.extras)
        record.update({
            "id": self.id,
            "houseNumber": self.house_number,
            "street": self.street,
            "city": self.city,
            "postcode": self.postcode,
        })
        if self.lat is not None:
            record["lat"] = self.lat
        if self.long is not None:
            record["long"] = self.long
        return record

    def __repr__(self):
        return f"<Address(id={self.id[:8]}..., {self.street} {self.house_number}, {self.postcode} {self.city})>"


@dataclass(frozen=True)
class AddressBookEntry:
    """An Address with the person living there; the unit stored in the address book."""
    address: Address
    first_name: str
    last_name: str

    @property
    def entry_id(self) -> str:
        return AddressId.derive([self.address.id, self.first_name, self.last_name]).value

    def to_dict(self) -> Dict[str, Any]:
        record = self.address.to_dict()
        record["firstName"] = self.first_name
        record["lastName"] = self.last_name
        return record

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'AddressBookEntry':
        known = {"id", "houseNumber", "street", "city", "postcode", "lat", "long", "firstName", "lastName"}
        address = Address(
            id=record["id"],
            house_number=record["houseNumber"],
            street=record["street"],
            city=record["city"],
            postcode=record["postcode"],
            lat=record.get("lat"),
            long=record.get("long"),
            extras={k: v for k, v in record.items() if k not in known},
        )
        return cls(address=address, first_name=record["firstName"], last_name=record["lastName"])
