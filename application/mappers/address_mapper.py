from typing import Any, Dict, Mapping

import structlog
from pydantic import ValidationError as PydanticValidationError

from application.schemas.address_schema import RawAddressSchema
from core_domain.entities.address import Address
from core_domain.exceptions import MalformedRecordError
from core_domain.value_objects.identifiers import AddressId


log = structlog.get_logger(__name__)

# Lookup records sometimes echo the house number back; the searched one wins.
IGNORED_RAW_FIELDS = ("id", "houseNumber", "firstName", "lastName")


def _describe_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ())) or "record"
        parts.append(f"{location} {error.get('msg', 'is invalid').lower()}")
    return "; ".join(parts)


def validate_raw_record(raw_record: Any) -> RawAddressSchema:
    if not isinstance(raw_record, Mapping):
        raise MalformedRecordError("Invalid address record: expected an object")
    try:
        return RawAddressSchema.model_validate(dict(raw_record))
    except PydanticValidationError as e:
        log.warning("Raw address record failed validation", errors=e.error_count())
        raise MalformedRecordError(f"Invalid address record: {_describe_errors(e)}") from e


def transform_address(raw_record: Mapping[str, Any], house_number: str) -> Address:
    """
    Maps a raw lookup record and the searched house number to a canonical Address.

    The id covers the whole normalized record, so equal records keep their
    identity across repeated searches and candidates that differ in any field
    (coordinates, unit, ...) stay apart.
    """
    schema = validate_raw_record(raw_record)
    house_number = "" if house_number is None else str(house_number)

    extras: Dict[str, Any] = {
        k: v for k, v in (schema.model_extra or {}).items() if k not in IGNORED_RAW_FIELDS
    }
    address_id = AddressId.derive([
        schema.street,
        schema.city,
        schema.postcode,
        house_number,
        schema.lat,
        schema.long,
        sorted(extras.items()),
    ])

    return Address(
        id=address_id.value,
        house_number=house_number,
        street=schema.street,
        city=schema.city,
        postcode=schema.postcode,
        lat=schema.lat,
        long=schema.long,
        extras=extras,
    )
