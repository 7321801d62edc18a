import json
import pytest
from app.core import auditing
from app.core.auditing import AuditSpan, AuditStatus, audit_emit
from app.core.ctx import REDIS_CTX
from app.domain.exceptions import NotFound


@pytest.mark.asyncio
async def test_audit_emit_without_redis_returns_none():
    result = await audit_emit(scope="LOCATIONS", action="CREATE", status=AuditStatus.SUCCESS)

    assert result is None


@pytest.mark.asyncio
async def test_audit_emit_with_redis_writes_to_stream(mocker):
    redis = mocker.Mock()
    redis.xadd = mocker.AsyncMock(return_value="1-0")
    token = REDIS_CTX.set(redis)
    try:
        result = await audit_emit(
            scope="ORDERS",
            action="CREATE",
            status=AuditStatus.SUCCESS,
            object_id=5,
            meta={"total_harga": 150000}
        )
    finally:
        REDIS_CTX.reset(token)

    assert result == "1-0"
    stream, fields = redis.xadd.await_args.args
    payload = json.loads(fields["json"])
    assert stream == auditing.AUDIT_STREAM
    assert payload["scope"] == "ORDERS"
    assert payload["object_id"] == 5
    assert payload["meta"] == {"total_harga": 150000}


@pytest.mark.asyncio
async def test_audit_emit_swallows_redis_failure(mocker):
    redis = mocker.Mock()
    redis.xadd = mocker.AsyncMock(side_effect=ConnectionError("down"))
    token = REDIS_CTX.set(redis)
    try:
        result = await audit_emit(scope="ORDERS", action="CREATE", status=AuditStatus.SUCCESS)
    finally:
        REDIS_CTX.reset(token)

    assert result is None


@pytest.mark.asyncio
async def test_audit_span_reports_failure_and_reraises(mocker):
    emit = mocker.patch("app.core.auditing.audit_emit", new=mocker.AsyncMock())

    with pytest.raises(NotFound):
        async with AuditSpan(scope="LOCATIONS", action="UPDATE", object_id=9):
            raise NotFound("Lokasi not found")

    kwargs = emit.await_args.kwargs
    assert kwargs["status"] == AuditStatus.FAIL
    assert kwargs["reason"] == "NotFound: Lokasi not found"
    assert "duration_ms" in kwargs["meta"]
    assert "occurred_at" in kwargs["meta"]


@pytest.mark.asyncio
async def test_audit_span_reports_success(mocker):
    emit = mocker.patch("app.core.auditing.audit_emit", new=mocker.AsyncMock())

    async with AuditSpan(scope="LOCATIONS", action="CREATE") as span:
        span.object_id = 3

    kwargs = emit.await_args.kwargs
    assert kwargs["status"] == AuditStatus.SUCCESS
    assert kwargs["object_id"] == 3
    assert kwargs["reason"] is None
