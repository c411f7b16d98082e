from dataclasses import FrozenInstanceError

import pytest

from application.mappers.address_mapper import transform_address
from core_domain.exceptions import FormatError, MalformedRecordError
from tests.conftest import record


def test_transform_builds_canonical_address():
    address = transform_address(record(lat="52.1", long=4.3, provider_ref="A1"), "350")
    assert address.house_number == "350"
    assert (address.street, address.city, address.postcode) == ("Main", "X", "1345")
    assert address.lat == 52.1
    assert address.long == 4.3
    assert address.extras == {"provider_ref": "A1"}
    assert len(address.id) == 32


def test_transform_is_idempotent():
    first = transform_address(record(), "350")
    second = transform_address(record(), "350")
    assert first.id == second.id
    assert first == second


@pytest.mark.parametrize("other, house_number", [
    (record(street="Side"), "350"),
    (record(city="Y"), "350"),
    (record(postcode="1346"), "350"),
    (record(), "351"),
])
def test_identifying_fields_change_the_id(other, house_number):
    assert transform_address(record(), "350").id != transform_address(other, house_number).id


@pytest.mark.parametrize("first, second", [
    (record(), record(lat=1.0)),
    (record(lat=1.0), record(lat=2.0)),
    (record(long=4.3), record(long=4.4)),
    (record(unit="A"), record(unit="B")),
    (record(lat=1.0, unit="A"), record(lat=2.0, unit="B")),
    (record(), record(unit="A")),
])
def test_distinct_records_get_distinct_ids(first, second):
    assert transform_address(first, "350").id != transform_address(second, "350").id


def test_extras_order_does_not_change_the_id():
    a = transform_address({**record(), "unit": "A", "floor": 2}, "350")
    b = transform_address({"floor": 2, **record(), "unit": "A"}, "350")
    assert a.id == b.id


def test_echoed_fields_do_not_change_the_id():
    assert transform_address(record(), "350").id == transform_address(record(houseNumber="999"), "350").id


def test_field_boundaries_are_not_ambiguous():
    a = transform_address(record(street="Main 1", city="X"), "350")
    b = transform_address(record(street="Main", city="1 X"), "350")
    assert a.id != b.id


def test_searched_house_number_wins_over_echoed_one():
    address = transform_address(record(houseNumber="999", id="provider-id"), "350")
    assert address.house_number == "350"
    assert "houseNumber" not in address.extras
    assert address.id != "provider-id"


def test_numeric_postcode_is_coerced_to_string():
    assert transform_address(record(postcode=1345), "350").postcode == "1345"


@pytest.mark.parametrize("raw", [
    {"city": "X", "postcode": "1345"},
    record(street="   "),
    record(city=None),
    "not a record",
    None,
])
def test_missing_identifying_fields_raise_malformed_record(raw):
    with pytest.raises(MalformedRecordError) as exc_info:
        transform_address(raw, "350")
    assert isinstance(exc_info.value, FormatError)
    assert exc_info.value.message.startswith("Invalid address record")


def test_address_is_immutable():
    address = transform_address(record(extra="x"), "350")
    with pytest.raises(FrozenInstanceError):
        address.street = "Other"
    with pytest.raises(TypeError):
        address.extras["extra"] = "y"


def test_to_dict_is_flat_record():
    address = transform_address(record(extra="x"), "350")
    assert address.to_dict() == {
        "id": address.id,
        "houseNumber": "350",
        "street": "Main",
        "city": "X",
        "postcode": "1345",
        "extra": "x",
    }
