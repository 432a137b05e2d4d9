from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from core.database import get_db
from crud.session_crud import get_session_by_token
from crud.user_crud import get_user

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _user_for_token(db: Session, token: str):
    s = get_session_by_token(db, token)
    if not s:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    exp = s.expires_at
    if exp.tzinfo is None:
        exp = exp.replace(tzinfo=timezone.utc)
    if exp < datetime.now(timezone.utc):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")

    user = get_user(db, s.user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_current_user(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return _user_for_token(db, token)


def get_optional_user(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    """Like get_current_user, but anonymous callers get None instead of a 401."""
    token = extract_bearer_token(authorization)
    if not token:
        return None
    return _user_for_token(db, token)


def get_session_id(x_session_id: Optional[str] = Header(None)) -> Optional[str]:
    """Browser-held id that scopes preferences of signed-out visitors."""
    if x_session_id is None:
        return None
    x_session_id = x_session_id.strip()
    return x_session_id[:128] or None
