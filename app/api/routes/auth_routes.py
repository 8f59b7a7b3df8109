"""
Authentication Routes

POST /auth/register - Register new user (returns token + user)
POST /auth/login - Login and get JWT token
GET /auth/profile - Get current user info
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from app.core.auth import authenticate
from app.db.mongodb import get_mongo_db
from app.services.user_service import UserService
from app.schemas.schemas import (
    RegisterRequest, LoginRequest, RegisterResponse, TokenResponse, UserResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_user_service(db: Database = Depends(get_mongo_db)) -> UserService:
    return UserService(db)


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(request: RegisterRequest, service: UserService = Depends(get_user_service)):
    """
    Register a new user account.

    Role defaults to "user". The response already carries a token.
    """
    return service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role
    )


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, service: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    return service.login(request.email, request.password)


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    user: dict = Depends(authenticate),
    service: UserService = Depends(get_user_service)
):
    """Get current user's account (never includes the password)."""
    return service.get_by_id(user["user_id"])
