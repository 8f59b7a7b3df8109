"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with passlib
- JWT token creation/verification
- FastAPI dependencies for protected routes (authenticate / authorize)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.errors import AuthError, ForbiddenError

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Bearer token extractor. auto_error=False so a missing or malformed
# header reaches authenticate() and becomes a 401 instead of a 403.
bearer_scheme = HTTPBearer(auto_error=False)

ROLES = ("admin", "user")


def hash_password(password: str) -> str:
    """Hash password (one-way)."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str, secret: Optional[str] = None, algorithm: Optional[str] = None) -> dict:
    """
    Decode and verify a JWT token.

    Pure function of (token, secret): returns the claims or raises AuthError
    for a malformed, tampered or expired token, or one without sub/role.
    """
    try:
        claims = jwt.decode(
            token,
            secret or settings.jwt_secret_key,
            algorithms=[algorithm or settings.jwt_algorithm]
        )
    except JWTError:
        raise AuthError("Invalid or expired token")

    if not claims.get("sub") or claims.get("role") not in ROLES:
        raise AuthError("Invalid token claims")
    return claims


async def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> dict:
    """
    FastAPI dependency - Get current authenticated user from the bearer token.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(authenticate)):
            return user
    """
    if credentials is None:
        raise AuthError("Authorization header missing or malformed, expected 'Bearer <token>'")

    claims = verify_token(credentials.credentials)
    return {"user_id": claims["sub"], "role": claims["role"]}


def authorize(*allowed_roles: str):
    """
    Dependency factory - Require the authenticated role to be in allowed_roles.

    Usage:
        @router.post("", dependencies=[Depends(authorize("admin"))])
    """
    async def role_checker(user: dict = Depends(authenticate)) -> dict:
        if user["role"] not in allowed_roles:
            raise ForbiddenError("You do not have permission to perform this action")
        return user

    return role_checker
