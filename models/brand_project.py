import uuid
from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from models.base import Base, TimestampMixin

class BrandProject(Base, TimestampMixin):
    """Link between a brand and one of its projects."""
    __tablename__ = "brand_projects"
    __table_args__ = (UniqueConstraint("brand_id", "project_id", name="uq_brand_projects_pair"),)

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    brand_id = Column(String(64), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
