"""
Script to create an admin account from the command line

Alternative to the /admin-setup page; also works once an admin exists.
"""

import asyncio
import logging
import uuid

from cueclub.auth import hash_password, generate_random_password
from cueclub.database import database, connect_db, disconnect_db
from cueclub.services.admin_service import ADMIN_ROLE

logger = logging.getLogger("create_admin")


async def create_admin(email: str, password: str = None):
    """
    Create an admin user with the admin role

    Args:
        email: Admin email
        password: Password (if None, will generate random)
    """
    await connect_db()

    try:
        existing = await database.fetch_one(
            "SELECT id FROM admin_users WHERE email = :email",
            {"email": email}
        )
        if existing:
            logger.error("Admin with email %s already exists", email)
            return

        generated = password is None
        if generated:
            password = generate_random_password(12)

        admin_id = str(uuid.uuid4())
        async with database.transaction():
            await database.execute(
                """
                INSERT INTO admin_users (id, email, password_hash, is_active)
                VALUES (:id, :email, :password_hash, TRUE)
                """,
                {"id": admin_id, "email": email, "password_hash": hash_password(password)}
            )
            await database.execute(
                "INSERT INTO user_roles (id, user_id, role) VALUES (:id, :user_id, :role)",
                {"id": str(uuid.uuid4()), "user_id": admin_id, "role": ADMIN_ROLE}
            )

        print("Admin created successfully!")
        print(f"   Email: {email}")
        if generated:
            print(f"   Password: {password}")
            print("   IMPORTANT: Save this password and change it after first login.")

    finally:
        await disconnect_db()


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    print("\n" + "=" * 60)
    print("CREATE ADMIN")
    print("=" * 60 + "\n")

    email = input("Enter email: ").strip()
    use_custom = input("Set custom password? (y/n): ").strip().lower()

    if use_custom == 'y':
        password = input("Enter password: ").strip()
        confirm = input("Confirm password: ").strip()

        if password != confirm:
            print("Passwords do not match!")
            return

        if len(password) < 8:
            print("Password must be at least 8 characters!")
            return
    else:
        password = None

    await create_admin(email, password)


if __name__ == "__main__":
    asyncio.run(main())
