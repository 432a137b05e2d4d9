import uuid
from sqlalchemy import Column, String, ForeignKey, Index
from models.base import Base, TimestampMixin

CREDENTIAL_PROVIDER = "credential"

class Account(Base, TimestampMixin):
    """Login method attached to a user. Only email/password credentials exist today."""
    __tablename__ = "account"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    provider_id = Column(String(64), nullable=False, default=CREDENTIAL_PROVIDER)
    password_hash = Column(String(255), nullable=True)

Index("idx_account_user_provider", Account.user_id, Account.provider_id, unique=True)
