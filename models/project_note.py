import uuid
from sqlalchemy import Column, String, Text, ForeignKey, Index
from models.base import Base, TimestampMixin

class ProjectNote(Base, TimestampMixin):
    __tablename__ = "project_notes"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False, default="")

Index("idx_project_notes_project_created_at", ProjectNote.project_id, ProjectNote.created_at)
