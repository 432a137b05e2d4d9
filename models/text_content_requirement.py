import uuid
from sqlalchemy import Column, String, Text, ForeignKey, Index
from models.base import Base, TimestampMixin

class TextContentRequirement(Base, TimestampMixin):
    __tablename__ = "text_content_requirements"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False, default="")
    memo = Column(Text, nullable=False, default="")

Index("idx_text_content_requirements_project_created_at", TextContentRequirement.project_id, TextContentRequirement.created_at)
