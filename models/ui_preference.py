import uuid
from sqlalchemy import Column, String, Boolean, ForeignKey, UniqueConstraint
from models.base import Base, TimestampMixin

class UIPreference(Base, TimestampMixin):
    """Expand/collapse state of a project section, keyed by user or anonymous session."""
    __tablename__ = "ui_preferences"
    __table_args__ = (
        UniqueConstraint("user_id", "project_id", "section_name", name="uq_ui_pref_user"),
        UniqueConstraint("session_id", "project_id", "section_name", name="uq_ui_pref_session"),
    )

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    section_name = Column(String(64), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=True)
    session_id = Column(String(128), nullable=True)
    is_expanded = Column(Boolean, nullable=False, default=True)
