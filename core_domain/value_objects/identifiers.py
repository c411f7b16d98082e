import hashlib
import json
from dataclasses import dataclass
from typing import Any, Sequence

ID_HEX_LENGTH = 32


@dataclass(frozen=True)
class AddressId:
    """Deterministic identifier of a physical address."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValueError("AddressId value must be a non-empty string.")

    @classmethod
    def derive(cls, parts: Sequence[Any]) -> 'AddressId':
        """
        Hashes the identifying parts exactly as given. The JSON encoding keeps
        ("a|b", "c") and ("a", "b|c") apart; nested mappings are key-sorted.
        """
        payload = json.dumps(list(parts), ensure_ascii=False, sort_keys=True, separators=(",", ":"), default=str)
        digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
        return cls(digest[:ID_HEX_LENGTH])

    def __str__(self) -> str:
        return self.value
