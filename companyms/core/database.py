# companyms/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청 단위 비동기 세션을 제공하는 의존성 함수를 제공합니다.
- 스키마와 테이블을 생성하는 함수를 포함합니다 (개발용, 운영은 Alembic 사용).
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy import text

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.core.config import settings

# 모든 SQLModel 테이블이 SQLModel.metadata에 등록되도록 모델을 임포트합니다.
from companyms.domains.company import models  # noqa

logger = logging.getLogger(__name__)

# 이 서비스가 사용하는 PostgreSQL 스키마 목록
SCHEMA = ["company"]

engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    future=True,
    pool_recycle=settings.DB_POOL_RECYCLE,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)

# 비동기 세션을 생성하는 '세션 공장'
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


async def create_db_and_tables(target: AsyncEngine = engine) -> None:
    """
    스키마와 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
    """
    async with target.begin() as conn:
        if conn.dialect.name == "postgresql":
            for schema_name in SCHEMA:
                await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {schema_name}"))
                logger.info("Schema '%s' ensured.", schema_name)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created (or already present).")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session

