import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class ProjectReturn(Base, TimestampMixin):
    __tablename__ = "returns"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    price_range = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    # draft | confirmed
    status = Column(String(32), nullable=False, default="draft")
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_returns_project_created_at", ProjectReturn.project_id, ProjectReturn.created_at)
