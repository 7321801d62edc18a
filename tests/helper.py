from datetime import datetime, timezone
from types import SimpleNamespace

NOW = datetime(2026, 1, 12, 16, 23, tzinfo=timezone.utc)


def db_with_flush(mocker):
    db = mocker.Mock()
    db.flush = mocker.AsyncMock()
    db.execute = mocker.AsyncMock()
    return db


def make_row(**fields):
    fields.setdefault("created_at", NOW)
    fields.setdefault("updated_at", NOW)
    return SimpleNamespace(**fields)
