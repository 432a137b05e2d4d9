import uuid
from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class ImageAsset(Base, TimestampMixin):
    __tablename__ = "image_assets"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    purpose = Column(Text, nullable=False, default="")
    url = Column(String(1024), nullable=False, default="")
    status = Column(String(64), nullable=False, default="")
    order_index = Column(Integer, nullable=False, default=0)

Index("idx_image_assets_project_created_at", ImageAsset.project_id, ImageAsset.created_at)
