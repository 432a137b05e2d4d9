import uuid
from sqlalchemy import Column, String, Boolean, ForeignKey, Index
from models.base import Base, TimestampMixin

class Subtask(Base, TimestampMixin):
    __tablename__ = "subtasks"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    task_id = Column(String(64), ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)

Index("idx_subtasks_task_id_created_at", Subtask.task_id, Subtask.created_at)
