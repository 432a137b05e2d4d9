import uuid
from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from models.base import Base, TimestampMixin

class Creator(Base, TimestampMixin):
    __tablename__ = "creators"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)


class CreatorBrand(Base, TimestampMixin):
    __tablename__ = "creator_brands"
    __table_args__ = (UniqueConstraint("creator_id", "brand_id", name="uq_creator_brands_pair"),)

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    creator_id = Column(String(64), ForeignKey("creators.id", ondelete="CASCADE"), nullable=False, index=True)
    brand_id = Column(String(64), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
