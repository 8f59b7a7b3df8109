"""
User Service - accounts, registration and login.

Only the password hash is stored; it never leaves this module.
"""

from typing import Optional

from app.core.auth import create_access_token, hash_password, verify_password
from app.core.config import get_settings
from app.core.errors import AuthError
from app.db.mongodb import COLLECTIONS
from app.services.mongo_service import DocumentService, serialize_doc

settings = get_settings()


class UserService(DocumentService):
    collection_name = COLLECTIONS["users"]
    entity = "User"
    unique_fields = ("email", "username")
    conflict_messages = {
        "email": "Email is already registered",
        "username": "Username is already taken"
    }

    def present(self, doc: dict) -> dict:
        doc = serialize_doc(doc)
        doc.pop("password_hash", None)
        return doc

    def create_user(self, username: str, email: str, password: str, role: str = "user") -> dict:
        """Insert a user, storing only the password hash."""
        return self.create({
            "username": username,
            "email": email,
            "password_hash": hash_password(password),
            "role": role
        })

    def register(self, username: str, email: str, password: str, role: Optional[str] = None) -> dict:
        """
        Create a user and return {token, user}.

        An explicit role is honoured only while allow_role_on_register is on;
        otherwise every new account is a plain "user".
        """
        if role is None or not settings.allow_role_on_register:
            role = "user"

        user = self.create_user(username, email, password, role)
        token = create_access_token(data={"sub": user["_id"], "role": user["role"]})
        return {"token": token, "user": user}

    def authenticate_user(self, email: str, password: str) -> dict:
        """
        Return the user for these credentials.

        Unknown email and wrong password fail the same way (AuthError, 401).
        """
        doc = self.collection.find_one({"email": email})
        if doc is None or not verify_password(password, doc["password_hash"]):
            raise AuthError("Invalid email or password")
        return self.present(doc)

    def login(self, email: str, password: str) -> dict:
        """Verify credentials and return {token}."""
        user = self.authenticate_user(email, password)
        token = create_access_token(data={"sub": user["_id"], "role": user["role"]})
        return {"token": token}
