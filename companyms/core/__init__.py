# companyms/core/__init__.py

"""
애플리케이션 전반에서 사용되는 핵심 구성 요소 패키지입니다.

- `config.py`: 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `security.py`: JWT 검증과 역할(role) 기반 권한 가드.
- `dependencies.py`: FastAPI 의존성 주입에서 사용하는 공통 의존성 함수들.
"""

__title__ = "companyms Core"
__version__ = "0.1.0"
__all__ = []
