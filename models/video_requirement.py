import uuid
from sqlalchemy import Column, String, Text, Boolean, ForeignKey, Index
from models.base import Base, TimestampMixin

class VideoRequirement(Base, TimestampMixin):
    __tablename__ = "video_requirements"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    video_type = Column(String(255), nullable=False, default="")
    duration = Column(String(64), nullable=False, default="")
    required_cuts = Column(Text, nullable=False, default="")
    has_narration = Column(Boolean, nullable=False, default=False)
    reference_url = Column(String(1024), nullable=False, default="")

Index("idx_video_requirements_project_created_at", VideoRequirement.project_id, VideoRequirement.created_at)
