from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def create_tables():
    # Entity modules register their tables on SQLModel.metadata at import
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def _unauthenticated(message: str) -> ClientError:
    return ClientError(
        Error("UNAUTHENTICATED", message), status_code=status.HTTP_401_UNAUTHORIZED
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise _unauthenticated("Access token is required")

    payload = verify_jwt(credentials.credentials)
    if payload is None or "user_id" not in payload:
        raise _unauthenticated("Invalid or expired token")

    return payload


async def get_actor(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> ActorContext:
    """
    Resolve the caller once per request from the token and a user lookup.

    Deleted and deactivated users are rejected even with a valid token;
    role and client assignment always come from the store, not the token.
    """
    try:
        user_id = UUID(current_user["user_id"])
    except (TypeError, ValueError):
        raise _unauthenticated("Invalid or expired token")

    async with uow:
        user = await uow.users.get_by_id(user_id)
        if user is None or not user.is_active:
            raise _unauthenticated("User not found or inactive")
        # Built before the unit of work rolls back and expires the row
        return ActorContext.from_user(user)
