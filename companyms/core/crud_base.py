# companyms/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 세션을 인자로 받으며, 세션을 직접 보관하지 않습니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Union

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _column(self, attribute: str) -> Any:
        if not hasattr(self.model, attribute):
            raise ValueError(f"Model {self.model.__name__} has no attribute '{attribute}'")
        return getattr(self.model, attribute)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        여러 레코드를 기본 키 순서로 조회합니다.
        """
        query = select(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        """
        속성 값이 일치하는 첫 번째 레코드(가장 작은 ID)를 반환합니다.
        """
        statement = (
            select(self.model)
            .where(self._column(attribute) == value)
            .order_by(self.model.id)
            .limit(1)
        )
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,  # 다중 속성 필터: {"attribute_name": "value"}
        order_by_field: Optional[str] = None,      # 정렬할 필드 (예: "name")
        order_desc: bool = False,                  # 내림차순 정렬 여부
        skip: int = 0,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        다중 속성 필터와 정렬, 페이징을 지원하는 다중 조회.
        존재하지 않는 속성이 전달되면 ValueError를 발생시킵니다.
        """
        query = select(self.model)

        # 1. 다중 속성 필터링
        if filters:
            conditions = [self._column(attribute) == value for attribute, value in filters.items()]
            query = query.where(*conditions)

        # 2. 정렬 (동일 값은 ID 순으로 고정)
        if order_by_field:
            column = self._column(order_by_field)
            query = query.order_by(column.desc() if order_desc else column.asc())
        query = query.order_by(self.model.id)

        # 3. 페이징
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        """
        전체 레코드 수를 반환합니다.
        """
        result = await db.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다.
        - Pydantic 모델이면 명시적으로 설정된 필드만 반영합니다 (부분 업데이트).
        - dict이면 전달된 모든 키를 그대로 반영합니다 (전체 교체).
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for key, value in update_data.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제하고, 삭제된 객체를 반환합니다 (없으면 None).
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj
