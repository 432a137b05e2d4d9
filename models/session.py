import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from models.base import Base, TimestampMixin

class AuthSession(Base, TimestampMixin):
    """Bearer token issued on sign-in."""
    __tablename__ = "auth_session"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    token = Column(String(128), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    ip_address = Column(String(128), nullable=True)
    user_agent = Column(String(512), nullable=True)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)

Index("idx_auth_session_user_id", AuthSession.user_id)
