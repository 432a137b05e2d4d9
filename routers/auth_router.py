from datetime import datetime, timedelta, timezone
import logging
import uuid

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from core.auth import extract_bearer_token, get_current_user, get_password_hash, verify_password
from core.config import settings
from core.database import get_db
from crud.session_crud import create_session, delete_session_by_token
from crud.user_crud import create_user_with_password, get_credential_account, get_user_by_email
from schemas.auth_schema import AuthTokenResponse, SignInRequest, SignUpRequest
from schemas.session_schema import SessionCreate
from schemas.user_schema import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_session(db: Session, user, request: Request) -> AuthTokenResponse:
    token = uuid.uuid4().hex
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.SESSION_TTL_DAYS)
    ip = request.client.host if request.client else None
    ua = request.headers.get("user-agent")

    session = create_session(
        db,
        payload=SessionCreate(
            user_id=user.id,
            token=token,
            expires_at=expires_at,
            ip_address=ip,
            user_agent=ua,
        ),
    )
    return AuthTokenResponse(access_token=session.token, user=user)


@router.post("/signup", response_model=AuthTokenResponse, status_code=201)
def sign_up(body: SignUpRequest, request: Request, db: Session = Depends(get_db)):
    """
    Register with email and password and return a bearer token.
    """
    if get_user_by_email(db, body.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    user = create_user_with_password(db, body.email, get_password_hash(body.password), name=body.name)
    logger.info("Registered user %s", user.id)
    return _issue_session(db, user, request)


@router.post("/signin", response_model=AuthTokenResponse)
def sign_in(body: SignInRequest, request: Request, db: Session = Depends(get_db)):
    """
    Verify email and password and issue a bearer token.
    """
    user = get_user_by_email(db, body.email)
    account = get_credential_account(db, user.id) if user else None
    if not account or not verify_password(body.password, account.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _issue_session(db, user, request)


@router.post("/signout", status_code=204)
def sign_out(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    token = extract_bearer_token(authorization)
    delete_session_by_token(db, token)
    return None


@router.get("/me", response_model=UserResponse)
def get_me(current_user=Depends(get_current_user)):
    return current_user
