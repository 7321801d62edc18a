from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auditing import AuditSpan
from app.domain.users.models import User
from app.domain.users.schemas import UserCreateDTO
from app.domain.users import crud
from app.domain.exceptions import NotFound, Conflict


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await crud.get_user_by_id(db, user_id)
    if not user:
        raise NotFound("User not found", ctx={"user_id": user_id})
    return user


async def create_user(db: AsyncSession, schema: UserCreateDTO) -> User:
    async with AuditSpan(scope="USERS", action="CREATE", object_type="user") as span:
        user = await crud.create_user(db, schema.model_dump())
        try:
            await db.flush()
        except IntegrityError as e:
            raise Conflict("Email already in use", ctx={"email": schema.email}) from e
        span.object_id = user.id
        return user
