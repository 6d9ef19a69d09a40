"""StoreMeta ORM — key/value identity of the local database (name, schema version)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class StoreMeta(Base):
    __tablename__ = "store_meta"

    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[str] = mapped_column(String(200), nullable=False)
