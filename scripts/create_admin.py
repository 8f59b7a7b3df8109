#!/usr/bin/env python3
"""
Create an admin account directly in MongoDB.

Use this when ALLOW_ROLE_ON_REGISTER is off and /auth/register can only
create plain users.

Usage: python scripts/create_admin.py <username> <email> <password>
"""
import argparse
import sys
sys.path.insert(0, '.')

from app.core.errors import CreationError
from app.db.mongodb import init_mongo_indexes
from app.services.user_service import UserService


def main():
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()

    init_mongo_indexes()
    service = UserService()
    try:
        user = service.create_user(args.username, args.email, args.password, role="admin")
    except CreationError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"✅ Admin created: {user['username']} <{user['email']}> id={user['_id']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
