import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class Meeting(Base, TimestampMixin):
    __tablename__ = "meetings"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    date = Column(String(32), nullable=False, default="")
    participants = Column(Text, nullable=False, default="")
    summary = Column(Text, nullable=False, default="")
    decisions = Column(Text, nullable=False, default="")
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_meetings_project_created_at", Meeting.project_id, Meeting.created_at)
