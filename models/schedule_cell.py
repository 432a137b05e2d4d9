import uuid
from sqlalchemy import Column, String, Text, Date, ForeignKey, UniqueConstraint
from models.base import Base, TimestampMixin

class ScheduleCell(Base, TimestampMixin):
    """One day's entry on the cross-project schedule grid."""
    __tablename__ = "project_schedules"
    __table_args__ = (UniqueConstraint("project_id", "date", name="uq_project_schedules_project_date"),)

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    content = Column(Text, nullable=False, default="")
    background_color = Column(String(16), nullable=False, default="#ffffff")
    text_color = Column(String(16), nullable=False, default="#000000")
