import logging
from fastapi import APIRouter, Depends
from app.schemas.user import UserLogin, UserOut, Token
from app.core.config import Settings
from app.core.deps import get_store, get_settings, get_current_user
from app.core.errors import UnauthorizedError, ErrorCode
from app.core.security import verify_password, create_access_token
from app.db.store import ScoreStore
from app.db.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    store: ScoreStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    user = store.get_user_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Failed login for '{credentials.username}'")
        raise UnauthorizedError("Invalid username or password", code=ErrorCode.AUTH_INVALID)

    token = create_access_token({"sub": str(user.id), "username": user.username}, settings)
    logger.info(f"User '{user.username}' logged in")

    return {"access_token": token, "token_type": "bearer"}

@router.get("/me", response_model=UserOut)
def get_current_user_data(current_user: User = Depends(get_current_user)):
    """Devuelve el usuario de la sesión actual"""
    return current_user
