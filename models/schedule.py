import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class Schedule(Base, TimestampMixin):
    __tablename__ = "schedules"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False, default="")
    milestone = Column(String(255), nullable=False, default="")
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_schedules_project_created_at", Schedule.project_id, Schedule.created_at)
