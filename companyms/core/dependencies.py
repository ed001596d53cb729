# companyms/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 현재 호출자 및 역할 가드 (security.py에서 재노출).
"""

from typing import AsyncGenerator
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.core.database import get_session as get_main_app_session

# flake8: noqa
from companyms.core.security import (
    Principal,
    RoleCheckedRoute,
    get_current_active_user,  # USER 또는 ADMIN
    get_current_admin_user,   # ADMIN 전용
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    companyms.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session
