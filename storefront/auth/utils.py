from passlib.context import CryptContext
from jose import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from fastapi import Depends, HTTPException, Request
from storefront.core.config import settings
from storefront.model.user_schema import ProfileResponse

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def build_session_claims(user) -> dict:
    """Claims carried by the session token: id, email, role and profile."""
    profile = None
    if user.profile is not None:
        profile = ProfileResponse.model_validate(user.profile).model_dump(mode="json")

    return {
        "sub": str(user.id),
        "email": user.email,
        "role": {"name": user.role.name, "level": user.role.level},
        "profile": profile,
    }


def create_access_token(data: dict, expires_minutes: Optional[int] = None) -> Tuple[str, datetime]:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM), expire


def decode_access_token(token: str) -> dict:
    """Raises ``JWTError`` on a bad signature, a malformed token or an expired one."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def session_from_payload(payload: dict) -> Optional[dict]:
    user_id = payload.get("sub")
    if user_id is None:
        return None
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None

    exp = payload.get("exp")
    return {
        "id": user_id,
        "email": payload.get("email"),
        "role": payload.get("role") or {},
        "profile": payload.get("profile"),
        "expires": datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
    }


def get_current_user(request: Request) -> dict:
    user = getattr(request.state, "user", None)
    if not user or not user.get("id"):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def require_role(*roles: str):
    """Dependency factory: 401 without a session, 403 when the role is not in ``roles``."""
    def dependency(user: dict = Depends(get_current_user)) -> dict:
        if user["role"].get("name") not in roles:
            raise HTTPException(status_code=403, detail="Forbidden")
        return user

    return dependency


require_admin = require_role(settings.ADMIN_ROLE)
