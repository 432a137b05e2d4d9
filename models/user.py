import uuid
from sqlalchemy import Column, String
from models.base import Base, TimestampMixin

class User(Base, TimestampMixin):
    """Project owner. Emails are stored lowercased."""
    __tablename__ = "user"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)

    @property
    def display_name(self) -> str:
        return self.name or self.email.split("@", 1)[0]
