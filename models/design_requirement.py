import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class DesignRequirement(Base, TimestampMixin):
    __tablename__ = "design_requirements"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    design_tone = Column(Text, nullable=False, default="")
    colors = Column(Text, nullable=False, default="")
    fonts = Column(Text, nullable=False, default="")
    ng_items = Column(Text, nullable=False, default="")
    reference_urls = Column(Text, nullable=False, default="")
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_design_requirements_project_created_at", DesignRequirement.project_id, DesignRequirement.created_at)
