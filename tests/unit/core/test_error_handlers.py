import pytest
from datetime import datetime, timezone
from fastapi import status
from app.api.exceptions import _status_for, _title_for, field_errors
from app.domain.exceptions import AppError, NotFound, Conflict, InvalidInput


@pytest.mark.parametrize(
    "exc, expected_status, expected_title",
    [
        (NotFound("x"), status.HTTP_404_NOT_FOUND, "Not Found"),
        (Conflict("x"), status.HTTP_409_CONFLICT, "Conflict"),
        (InvalidInput("x"), status.HTTP_400_BAD_REQUEST, "Bad Request"),
        (AppError("x"), status.HTTP_400_BAD_REQUEST, "Application Error"),
    ]
)
def test_status_and_title_mapping(exc, expected_status, expected_title):
    assert _status_for(exc) == expected_status
    assert _title_for(exc) == expected_title


def test_subclass_of_not_found_maps_to_404():
    class LocationMissing(NotFound):
        pass

    assert _status_for(LocationMissing()) == status.HTTP_404_NOT_FOUND


def test_app_error_defaults_message_to_class_name():
    assert str(Conflict()) == "Conflict"


def test_app_error_normalizes_ctx():
    when = datetime(2026, 1, 12, tzinfo=timezone.utc)

    exc = NotFound("Tiket not found", ctx={"tiket_ids": (1, 2), "at": when, "obj": object})

    assert exc.ctx["tiket_ids"] == [1, 2]
    assert exc.ctx["at"] == when.isoformat()
    assert isinstance(exc.ctx["obj"], str)


def test_field_errors_strips_location_prefix():
    errors = [
        {"loc": ("body", "nama_lokasi"), "msg": "Field required", "type": "missing"},
        {"loc": ("body", "items", 0, "jumlah"), "msg": "Input should be greater than 0", "type": "greater_than"},
        {"loc": ("body",), "msg": "Invalid JSON", "type": "json_invalid"},
    ]

    result = field_errors(errors)

    assert result == [
        {"field": "nama_lokasi", "message": "Field required"},
        {"field": "items.0.jumlah", "message": "Input should be greater than 0"},
        {"field": "__root__", "message": "Invalid JSON"},
    ]
