from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin


class Favorite(TimestampMixin, Base):
    """즐겨찾기 장소 모델"""

    __tablename__ = "favorites"

    id: Mapped[int] = mapped_column(primary_key=True)
    address: Mapped[str] = mapped_column(String(200), unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Favorite id={self.id} address={self.address!r} name={self.display_name!r}>"
