import pytest
from sqlalchemy.exc import IntegrityError
from app.domain.exceptions import NotFound, Conflict
from app.domain.orders.schemas import OrderCreateDTO, OrdersQueryDTO
from app.services import order_service
from tests.helper import db_with_flush, make_row, NOW


def make_order_from(data: dict, details: list[dict]):
    rows = [make_row(id=i + 1, order_id=1, **d) for i, d in enumerate(details)]
    return make_row(id=1, tanggal_order=data.get("tanggal_order", NOW), details=rows, **{
        k: v for k, v in data.items() if k != "tanggal_order"
    })


def patch_create(mocker):
    async def _create(db, data, details):
        return make_order_from(data, details)
    return mocker.patch("app.services.order_service.crud.create_order", new=mocker.AsyncMock(side_effect=_create))


@pytest.fixture
def tickets():
    return {
        1: make_row(id=1, event_id=10, tipe="VIP", harga=250000, stok=5),
        2: make_row(id=2, event_id=10, tipe="Reguler", harga=100000, stok=100),
    }


@pytest.mark.asyncio
async def test_create_order_computes_subtotals_total_and_decrements_stock(mocker, tickets, auditspan_stub):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock())
    mocker.patch(
        "app.services.order_service.tickets_crud.get_tickets_by_ids",
        new=mocker.AsyncMock(return_value=tickets)
    )
    create = patch_create(mocker)
    db = db_with_flush(mocker)
    schema = OrderCreateDTO(user_id=3, items=[{"tiket_id": 1, "jumlah": 2}, {"tiket_id": 2, "jumlah": 3}])

    result = await order_service.create_order(db, schema)

    _, data, details = create.await_args.args
    assert details == [
        {"tiket_id": 1, "jumlah": 2, "subtotal_harga": 500000},
        {"tiket_id": 2, "jumlah": 3, "subtotal_harga": 300000},
    ]
    assert data == {"user_id": 3, "total_harga": 800000}
    assert tickets[1].stok == 3
    assert tickets[2].stok == 97
    assert result.message == "Order berhasil ditambahkan."
    assert result.data.total_harga == 800000
    assert [d.subtotal_harga for d in result.data.details] == [500000, 300000]
    db.flush.assert_awaited_once_with()
    assert auditspan_stub[0].order_id == 1


@pytest.mark.asyncio
async def test_create_order_merges_duplicate_ticket_lines(mocker, tickets):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock())
    lookup = mocker.patch(
        "app.services.order_service.tickets_crud.get_tickets_by_ids",
        new=mocker.AsyncMock(return_value=tickets)
    )
    create = patch_create(mocker)
    schema = OrderCreateDTO(user_id=3, items=[{"tiket_id": 1, "jumlah": 1}, {"tiket_id": 1, "jumlah": 2}])

    await order_service.create_order(db_with_flush(mocker), schema)

    assert list(lookup.await_args.args[1]) == [1]
    _, _, details = create.await_args.args
    assert details == [{"tiket_id": 1, "jumlah": 3, "subtotal_harga": 750000}]


@pytest.mark.asyncio
async def test_create_order_with_unknown_ticket_raises_404(mocker, tickets):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock())
    mocker.patch(
        "app.services.order_service.tickets_crud.get_tickets_by_ids",
        new=mocker.AsyncMock(return_value={1: tickets[1]})
    )
    create = patch_create(mocker)
    schema = OrderCreateDTO(user_id=3, items=[{"tiket_id": 1, "jumlah": 1}, {"tiket_id": 99, "jumlah": 1}])

    with pytest.raises(NotFound) as e:
        await order_service.create_order(db_with_flush(mocker), schema)

    assert e.value.ctx == {"tiket_ids": [99]}
    create.assert_not_awaited()
    assert tickets[1].stok == 5


@pytest.mark.asyncio
async def test_create_order_insufficient_stock_changes_nothing(mocker, tickets):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock())
    mocker.patch(
        "app.services.order_service.tickets_crud.get_tickets_by_ids",
        new=mocker.AsyncMock(return_value=tickets)
    )
    create = patch_create(mocker)
    schema = OrderCreateDTO(user_id=3, items=[{"tiket_id": 2, "jumlah": 1}, {"tiket_id": 1, "jumlah": 6}])

    with pytest.raises(Conflict) as e:
        await order_service.create_order(db_with_flush(mocker), schema)

    assert str(e.value) == "Insufficient stock"
    assert e.value.ctx == {"tiket_id": 1, "stok": 5, "jumlah": 6}
    assert tickets[2].stok == 100
    create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_order_for_unknown_user_raises_404(mocker):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock(side_effect=NotFound("User not found")))
    lookup = mocker.patch("app.services.order_service.tickets_crud.get_tickets_by_ids", new=mocker.AsyncMock())

    with pytest.raises(NotFound):
        await order_service.create_order(
            db_with_flush(mocker),
            OrderCreateDTO(user_id=3, items=[{"tiket_id": 1, "jumlah": 1}])
        )

    lookup.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_order_flush_failure_raises_conflict(mocker, tickets):
    mocker.patch("app.services.order_service.get_user", new=mocker.AsyncMock())
    mocker.patch(
        "app.services.order_service.tickets_crud.get_tickets_by_ids",
        new=mocker.AsyncMock(return_value=tickets)
    )
    patch_create(mocker)
    db = db_with_flush(mocker)
    db.flush.side_effect = IntegrityError("stmt", {}, Exception("check"))

    with pytest.raises(Conflict):
        await order_service.create_order(db, OrderCreateDTO(user_id=3, items=[{"tiket_id": 1, "jumlah": 1}]))


@pytest.mark.asyncio
async def test_get_order_not_found_raises_404(mocker):
    mocker.patch("app.services.order_service.crud.get_order_by_id", new=mocker.AsyncMock(return_value=None))

    with pytest.raises(NotFound) as e:
        await order_service.get_order(mocker.Mock(), 8)

    assert e.value.ctx == {"order_id": 8}


@pytest.mark.asyncio
async def test_list_orders_builds_page(mocker):
    order = make_order_from({"user_id": 3, "total_harga": 0}, [])
    crud = mocker.patch(
        "app.services.order_service.crud.list_orders",
        new=mocker.AsyncMock(return_value=([order], 1))
    )
    db = mocker.Mock()

    page = await order_service.list_orders(db, OrdersQueryDTO(user_id=3))

    crud.assert_awaited_once_with(db, 1, 20, user_id=3)
    assert page.total == 1
    assert page.items[0].user_id == 3


@pytest.mark.asyncio
async def test_delete_order_is_idempotent(mocker):
    mocker.patch("app.services.order_service.crud.delete_order", new=mocker.AsyncMock(return_value=0))

    result = await order_service.delete_order(mocker.Mock(), 8)

    assert result.ok is True
    assert result.message == "Order berhasil dihapus."
