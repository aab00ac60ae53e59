"""Database models for the application."""
from sqlalchemy import Column, Integer, String, Text

from aidu.models.base import Base, TimestampMixin


class ProgressBlob(Base, TimestampMixin):
    """Serialized progress document stored under a fixed key.

    The whole document is rewritten on every save; there are no
    field-level updates at this boundary.
    """

    __tablename__ = "progress_blobs"

    id = Column(Integer, primary_key=True)
    key = Column(String, unique=True, nullable=False, index=True)
    payload = Column(Text, nullable=False)
