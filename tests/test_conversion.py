from decimal import Decimal
import pytest
from floorstatus.domain.conversion import to_bool, to_int
from floorstatus.domain.models import TableRecord
from floorstatus.exceptions import RowConversionError
from floorstatus.services.table_fetcher import row_to_record

@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    (1, True),
    (0, False),
    (Decimal("1"), True),
    (b"\x01", True),
    (b"\x00", False),
    ("TRUE", True),
    (" false ", False),
])
def test_to_bool(value, expected):
    assert to_bool(value) is expected

@pytest.mark.parametrize("value", [None, "yes", "", "1", "0", 1.5j])
def test_to_bool_rejects(value):
    with pytest.raises((TypeError, ValueError)):
        to_bool(value)

@pytest.mark.parametrize("value, expected", [
    (4, 4),
    ("4", 4),
    (Decimal("11"), 11),
    (4.0, 4),
    (b"\x05", 5),
    (4.5, 4),
    (5.5, 6),
    (Decimal("3.5"), 4),
    (-1, -1),
])
def test_to_int(value, expected):
    assert to_int(value) == expected

@pytest.mark.parametrize("value", [None, "four", "4.5", float("nan"), float("inf")])
def test_to_int_rejects(value):
    with pytest.raises((TypeError, ValueError, OverflowError)):
        to_int(value)

def test_row_to_record():
    record = row_to_record({"table_id": 5, "seats": 4, "is_reserved": 1})
    assert record == TableRecord(table_id=5, seats=4, is_reserved=True)

def test_record_is_immutable():
    record = TableRecord(table_id=5, seats=4, is_reserved=True)
    with pytest.raises(Exception):
        record.seats = 6

@pytest.mark.parametrize("row", [
    {"table_id": 5, "seats": 4},
    {"table_id": None, "seats": 4, "is_reserved": 0},
    {"table_id": 5, "seats": float("inf"), "is_reserved": 0},
])
def test_row_to_record_rejects(row):
    with pytest.raises(RowConversionError):
        row_to_record(row)

def test_row_to_record_keeps_driver_seat_values():
    record = row_to_record({"table_id": 2, "seats": -1, "is_reserved": 0})
    assert record.seats == -1

    record = row_to_record({"table_id": 2, "seats": 4.5, "is_reserved": 0})
    assert record.seats == 4
