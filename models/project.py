import enum
import uuid
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Index
from models.base import Base, TimestampMixin


class ProjectStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    DONE = "done"
    PICKS = "picks"


class BrandType(str, enum.Enum):
    BRAND_A = "brand_a"
    BRAND_B = "brand_b"


class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(String(32), nullable=False, default=ProjectStatus.IN_PROGRESS.value)
    brand_type = Column(String(32), nullable=False, default=BrandType.BRAND_A.value)
    is_shared = Column(Boolean, nullable=False, default=False)
    share_token = Column(String(64), unique=True, nullable=True)
    shared_at = Column(DateTime(timezone=True), nullable=True)

Index("idx_projects_user_id_updated_at", Project.user_id, Project.updated_at.desc())
Index("idx_projects_brand_status", Project.brand_type, Project.status)
