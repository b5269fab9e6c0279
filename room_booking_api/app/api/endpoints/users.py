"""
User endpoints.

Registration and login are public.  Registration does not log the
user in; clients call ``/login`` afterwards to obtain a token.
"""

from fastapi import APIRouter, Depends

from room_booking_api.app.core.security import create_access_token, get_current_user
from room_booking_api.app.schemas import MessageResponse
from room_booking_api.app.schemas.user import LoginResponse, UserCreate, UserLogin, UserRead
from room_booking_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", response_model=MessageResponse)
async def register_user(user: UserCreate) -> MessageResponse:
    """Register a new user.

    Returns 400 if the email is already registered.
    """
    await UserService.create_user(user)
    return MessageResponse(message="Registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login_user(credentials: UserLogin) -> LoginResponse:
    """Authenticate a user and return a bearer token with the user's profile."""
    user = await UserService.authenticate(credentials.email, credentials.password)
    token = create_access_token({"id": user.id, "email": user.email})
    return LoginResponse(token=token, user=user)


@router.get("/me", response_model=UserRead)
async def read_me(current_user: dict = Depends(get_current_user)) -> UserRead:
    """Return the profile of the authenticated user, 404 if it no longer exists."""
    return await UserService.get_user_by_id(current_user["id"])
