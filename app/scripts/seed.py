import asyncio
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import ADMIN_EMAIL, ADMIN_NAME
from app.core.database import AsyncSessionLocal, init_models
from app.core.logging_config import configure_logging
from app.domain.locations.models import Location
from app.domain.users.crud import get_user_by_email
from app.domain.users.schemas import UserCreateDTO
from app.domain.users.models import User
from app.services.user_service import create_user

logger = logging.getLogger("app.seed")

LOCATION_NAMES = ("Stadion Utama", "Galeri Seni Kota", "Taman Kota")


async def seed_locations(db: AsyncSession) -> list[Location]:
    # not idempotent: running it twice inserts the rows twice
    locations = [Location(nama_lokasi=name) for name in LOCATION_NAMES]
    db.add_all(locations)
    await db.flush()
    return locations


async def seed_admin_user(db: AsyncSession, email: str | None = ADMIN_EMAIL) -> User | None:
    if not email:
        logger.warning("ADMIN_EMAIL missing - skipping admin user seed")
        return None

    user = await get_user_by_email(db, email)
    if not user:
        user = await create_user(db, UserCreateDTO(name=ADMIN_NAME, email=email))
    return user


async def main():
    configure_logging()
    await init_models()
    async with AsyncSessionLocal() as db:
        locations = await seed_locations(db)
        user = await seed_admin_user(db)
        await db.commit()
    logger.info("Seeded %d locations", len(locations))
    if user:
        logger.info("Admin OK: %s", user.email)


if __name__ == "__main__":
    asyncio.run(main())
