# companyms/domains/company/crud.py

"""
'company' 도메인의 CRUD 및 조회 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.core.crud_base import CRUDBase
from . import models as company_models
from . import schemas as company_schemas


class CRUDCompany(CRUDBase[company_models.Company, company_schemas.CompanyCreate, company_schemas.CompanyUpdate]):
    def __init__(self):
        super().__init__(model=company_models.Company)

    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[company_models.Company]:
        """회사명으로 조회합니다 (정확히 일치, 중복 시 가장 작은 ID)."""
        return await self.get_by_attribute(db, attribute="name", value=name)

    async def search(self, db: AsyncSession, *, query: str) -> List[company_models.Company]:
        """회사명 또는 설명에 검색어가 포함된 회사를 대소문자 구분 없이 조회합니다."""
        # autoescape: 검색어의 % 와 _ 는 와일드카드가 아니라 문자 그대로 비교합니다.
        statement = (
            select(self.model)
            .where(or_(
                self.model.name.icontains(query, autoescape=True),
                self.model.description.icontains(query, autoescape=True),
            ))
            .order_by(self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_by_founded_year(self, db: AsyncSession, *, year: int) -> List[company_models.Company]:
        return await self.get_filtered(db, filters={"founded_year": year})

    async def get_sorted(self, db: AsyncSession, *, field: company_schemas.SortField) -> List[company_models.Company]:
        """정렬 필드 기준 오름차순 전체 목록"""
        return await self.get_filtered(db, order_by_field=field.column)

    async def get_page(
        self, db: AsyncSession, *, page: int, page_size: int
    ) -> Tuple[List[company_models.Company], int]:
        """
        ID 순으로 정렬된 한 페이지와 전체 레코드 수를 반환합니다. page는 0부터 시작합니다.
        """
        total = await self.count(db)
        items = await self.get_multi(db, skip=page * page_size, limit=page_size)
        return items, total

    async def set_logo(
        self, db: AsyncSession, *, db_obj: company_models.Company, logo_data: bytes, logo_type: str
    ) -> company_models.Company:
        """로고 바이너리와 MIME 타입을 한 번에 저장합니다."""
        return await self.update(db, db_obj=db_obj, obj_in={"logo_data": logo_data, "logo_type": logo_type})


company = CRUDCompany()
