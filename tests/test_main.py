# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 루트 경로 (`/`) 응답
- 데이터베이스 연결 헬스 체크 엔드포인트 (`/health-check`)
- 요청 형식 오류의 400 매핑
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """
    루트 엔드포인트 (`GET /`)가 환영 메시지를 반환하는지 테스트합니다.
    """
    response = await client.get("/")

    assert response.status_code == 200
    assert "Visit /docs" in response.json()["message"]


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """
    헬스 체크 엔드포인트가 데이터베이스 연결 상태를 올바르게 반환하는지 테스트합니다.
    """
    response = await client.get("/health-check")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_request_validation_error_maps_to_400(authorized_client: AsyncClient):
    """
    경로 파라미터 형식 오류는 422가 아니라 400으로 응답해야 합니다.
    """
    response = await authorized_client.get("/companies/filterByYear/not-a-year")

    assert response.status_code == 400
    assert isinstance(response.json()["detail"], list)


def test_openapi_metadata_comes_from_settings():
    """
    애플리케이션 이름과 버전은 설정(settings) 한 곳에서만 관리됩니다.
    """
    import companyms
    from companyms.core.config import settings
    from companyms.main import app

    assert app.title == settings.APP_NAME
    assert app.version == settings.APP_VERSION
    assert not hasattr(companyms, "APP_NAME")
