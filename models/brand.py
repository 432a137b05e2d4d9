import uuid
from sqlalchemy import Column, String, Text, ForeignKey, Index
from models.base import Base, TimestampMixin

class Brand(Base, TimestampMixin):
    __tablename__ = "brands"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    theme = Column(Text, nullable=False, default="")
    features = Column(Text, nullable=False, default="")

Index("idx_brands_user_created_at", Brand.user_id, Brand.created_at)
