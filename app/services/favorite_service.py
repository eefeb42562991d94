"""즐겨찾기 서비스."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.favorite import Favorite

logger = logging.getLogger(__name__)


class FavoriteService:

    def __init__(self, session: AsyncSession, max_favorites: int | None = None):
        self.session = session
        self.max_favorites = settings.max_favorites if max_favorites is None else max_favorites

    async def add(self, address: str, display_name: str | None = None) -> Favorite:
        """즐겨찾기 추가. 중복 주소이거나 최대 개수를 넘으면 ValueError."""
        address = address.strip()
        if not address:
            raise ValueError("주소가 비어 있습니다.")

        if await self.get_by_address(address) is not None:
            raise ValueError("이미 즐겨찾기에 추가된 장소입니다.")

        if await self.count() >= self.max_favorites:
            raise ValueError(f"즐겨찾기는 최대 {self.max_favorites}개까지 추가할 수 있습니다.")

        name = display_name.strip() if display_name and display_name.strip() else address
        favorite = Favorite(address=address, display_name=name)
        self.session.add(favorite)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # 동시 요청으로 같은 주소가 먼저 저장된 경우
            await self.session.rollback()
            raise ValueError("이미 즐겨찾기에 추가된 장소입니다.") from e
        logger.info("즐겨찾기 추가: %s", address)
        return favorite

    async def remove(self, favorite_id: int) -> None:
        favorite = await self.get(favorite_id)
        if favorite is None:
            raise ValueError(f"즐겨찾기 {favorite_id}을(를) 찾을 수 없습니다.")
        await self.session.delete(favorite)
        await self.session.commit()
        logger.info("즐겨찾기 삭제: %s", favorite.address)

    async def rename(self, favorite_id: int, display_name: str) -> Favorite:
        """표시 이름 변경. 빈 이름은 허용하지 않는다."""
        name = display_name.strip()
        if not name:
            raise ValueError("이름을 입력해주세요.")
        favorite = await self.get(favorite_id)
        if favorite is None:
            raise ValueError(f"즐겨찾기 {favorite_id}을(를) 찾을 수 없습니다.")
        favorite.display_name = name
        await self.session.commit()
        return favorite

    async def toggle(self, address: str) -> Favorite | None:
        """있으면 삭제하고 None, 없으면 추가한 항목을 반환."""
        existing = await self.get_by_address(address.strip())
        if existing is not None:
            await self.remove(existing.id)
            return None
        return await self.add(address)

    async def get(self, favorite_id: int) -> Favorite | None:
        result = await self.session.execute(
            select(Favorite).where(Favorite.id == favorite_id)
        )
        return result.scalar_one_or_none()

    async def get_by_address(self, address: str) -> Favorite | None:
        result = await self.session.execute(
            select(Favorite).where(Favorite.address == address)
        )
        return result.scalar_one_or_none()

    async def is_favorite(self, address: str) -> bool:
        return await self.get_by_address(address) is not None

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(Favorite.id)))
        return result.scalar_one()

    async def list_all(self) -> list[Favorite]:
        result = await self.session.execute(select(Favorite).order_by(Favorite.id))
        return list(result.scalars().all())
