"""User ORM model. Rows are created by the identity service; read here for existence and profile."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskshare.infrastructure.persistence.database import Base
from taskshare.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class User(CuidMixin, TimestampMixin, Base):
    """User model. Table: app_user. Unique email."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
