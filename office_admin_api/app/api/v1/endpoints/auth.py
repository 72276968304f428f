"""
Authentication endpoints for API v1.

Provide registration, login, logout and the current-user lookup used by
the dashboard on start-up.  A successful login opens a server-side
session; its token is returned in the body and set as an HttpOnly
cookie, so both browsers and API clients can authenticate.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from office_admin_api.app.core.config import Settings, get_settings
from office_admin_api.app.core.security import close_session, get_current_user, open_session
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.user import LoginResponse, UserCreate, UserLogin, UserRead
from office_admin_api.app.services.user_service import UserService


router = APIRouter()


def _start_session(response: Response, store: Store, user: dict, app_settings: Settings) -> LoginResponse:
    token = open_session(store, user, app_settings)
    response.set_cookie(
        app_settings.session_cookie_name,
        token,
        max_age=app_settings.access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return LoginResponse(user=UserRead.model_validate(user), access_token=token)


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_in: UserCreate,
    response: Response,
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Register a new user and log them in.

    Responds 400 if the username is taken.
    """
    try:
        user = await UserService.create_user(store, user_in)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return _start_session(response, store, user.model_dump(), app_settings)


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> LoginResponse:
    user = await UserService.authenticate(store, credentials.username, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _start_session(response, store, user, app_settings)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    response: Response,
    current_user: dict = Depends(get_current_user),
    store: Store = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> None:
    """Close the caller's session; its token stops working immediately."""
    close_session(store, current_user["session_id"])
    response.delete_cookie(app_settings.session_cookie_name)
    return None


@router.get("/user", response_model=UserRead)
async def read_current_user(current_user: dict = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)
