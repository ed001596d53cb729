# tests/__init__.py

"""
companyms FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 엔진, 트랜잭션 롤백 세션, 역할별 AsyncClient 등 공용 픽스처.
- `core/`: 토큰 검증, 역할 파싱 등 공통 모듈 테스트.
- `domains/`: 'company' 도메인의 API/서비스 테스트.
"""

__title__ = "companyms API Tests"
__description__ = "Test suite for the companyms FastAPI application."
__version__ = "0.1.0"
__all__ = []
