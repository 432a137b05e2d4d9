import uuid
from sqlalchemy import Column, String, Text, ForeignKey, Index
from models.base import Base, TimestampMixin

class TaskNote(Base, TimestampMixin):
    __tablename__ = "task_notes"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    task_id = Column(String(64), ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False, default="")

Index("idx_task_notes_task_id_created_at", TaskNote.task_id, TaskNote.created_at)
