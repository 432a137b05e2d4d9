import enum
import uuid
from sqlalchemy import Column, String, Text, Date, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin


class TaskStatus(str, enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(Base, TimestampMixin):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    # No FK on parent_id: orphaned references are tolerated and surface as roots
    parent_id = Column(String(64), nullable=True)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(32), nullable=False, default=TaskStatus.NOT_STARTED.value)
    due_date = Column(Date, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_tasks_project_parent_order", Task.project_id, Task.parent_id, Task.order_index)
