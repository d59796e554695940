from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from app.core.config import Settings
from app.core.errors import UnauthorizedError, ErrorCode
from app.core.security import decode_access_token
from app.db.store import ScoreStore
from app.db.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_store(request: Request) -> ScoreStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    store: ScoreStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> User:
    if not token:
        raise UnauthorizedError()

    try:
        payload = decode_access_token(token, settings)
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        raise UnauthorizedError("Invalid or expired token", code=ErrorCode.AUTH_INVALID)

    user = store.get_user(user_id)
    if not user:
        raise UnauthorizedError("User not found", code=ErrorCode.AUTH_INVALID)

    return user
