from sqlalchemy.orm import Session
from models.session import AuthSession
from schemas.session_schema import SessionCreate


def get_session_by_token(db: Session, token: str):
    return db.query(AuthSession).filter(AuthSession.token == token).first()


def create_session(db: Session, payload: SessionCreate):
    s = AuthSession(**payload.model_dump())
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def delete_session_by_token(db: Session, token: str) -> bool:
    s = get_session_by_token(db, token)
    if not s:
        return False
    db.delete(s)
    db.commit()
    return True
