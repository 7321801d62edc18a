import pytest
from pydantic import ValidationError
from sqlalchemy import select
from app.domain import Location, User
from app.scripts.seed import seed_locations, seed_admin_user


async def location_names(db) -> list[str]:
    return (await db.scalars(select(Location.nama_lokasi).order_by(Location.id))).all()


@pytest.mark.asyncio
async def test_seed_locations_inserts_the_three_fixed_rows(db):
    await seed_locations(db)

    assert await location_names(db) == ["Stadion Utama", "Galeri Seni Kota", "Taman Kota"]


@pytest.mark.asyncio
async def test_seed_locations_twice_duplicates_rows(db):
    await seed_locations(db)
    await seed_locations(db)

    assert len(await location_names(db)) == 6


@pytest.mark.asyncio
async def test_seed_admin_user_is_idempotent(db):
    first = await seed_admin_user(db, "admin@tiketku.id")
    second = await seed_admin_user(db, "admin@tiketku.id")

    assert first.id == second.id
    assert len((await db.scalars(select(User))).all()) == 1


@pytest.mark.asyncio
async def test_seed_admin_user_without_email_skips(db):
    assert await seed_admin_user(db, None) is None


@pytest.mark.asyncio
async def test_seed_admin_user_rejects_invalid_email(db):
    with pytest.raises(ValidationError):
        await seed_admin_user(db, "bukan-email")

    assert (await db.scalars(select(User))).all() == []


@pytest.mark.asyncio
async def test_seed_admin_user_is_audited(db, auditspan_stub):
    user = await seed_admin_user(db, "admin@tiketku.id")

    assert [(s.scope, s.action, s.object_id) for s in auditspan_stub] == [("USERS", "CREATE", user.id)]
