from sqlalchemy.orm import Session
from models.user import User
from models.account import Account, CREDENTIAL_PROVIDER


def get_user(db: Session, user_id: str):
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create_user_with_password(db: Session, email: str, password_hash: str, name: str | None = None):
    user = User(email=email.strip().lower(), name=name)
    db.add(user)
    db.flush()
    db.add(Account(user_id=user.id, provider_id=CREDENTIAL_PROVIDER, password_hash=password_hash))
    db.commit()
    db.refresh(user)
    return user


def get_credential_account(db: Session, user_id: str):
    return (
        db.query(Account)
        .filter(Account.user_id == user_id, Account.provider_id == CREDENTIAL_PROVIDER)
        .first()
    )
