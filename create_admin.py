"""
Bootstrap the first admin account.

    python create_admin.py --username admin --email admin@example.com --password secret123
"""

import argparse
import asyncio

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.passwords import hash_password
from src.depends import AsyncSessionLocal, create_tables
from src.domain.entities import User, UserRole


async def create_admin(username: str, email: str, password: str) -> None:
    await create_tables()

    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUnitOfWork(session)
        async with uow:
            existing = await uow.users.find_conflicting(username, email.lower())
            if existing is not None:
                print(f"User already exists: {existing.username} <{existing.email}>")
                return

            admin = User(
                username=username,
                email=email.lower(),
                password_hash=hash_password(password),
                role=UserRole.admin,
            )
            await uow.users.create(admin)
            await uow.commit()

    print(f"Admin created: {username} <{email.lower()}>")


def main():
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args()
    asyncio.run(create_admin(args.username, args.email, args.password))


if __name__ == "__main__":
    main()
