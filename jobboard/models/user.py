"""
User model - represents an application user.
"""
from sqlalchemy import Boolean, CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.core.database import Base


class User(Base):
    """
    User entity.

    ``password`` holds the bcrypt hash, never the plain text.
    """

    __tablename__ = "users"

    __table_args__ = (
        CheckConstraint("position('@' IN email) > 1", name="ck_users_email"),
    )

    username: Mapped[str] = mapped_column(String(25), primary_key=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")

    def __repr__(self) -> str:
        return f"<User {self.username}>"
