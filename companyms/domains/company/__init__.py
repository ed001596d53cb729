# companyms/domains/company/__init__.py

"""
'company' 도메인 패키지입니다.

PostgreSQL의 'company' 스키마에 해당하는 Company 테이블과
관련 비즈니스 로직 및 API 엔드포인트를 포함합니다.

주요 서브모듈:
- `models.py`: company.companies 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청/응답 Pydantic 모델 (CompanyCreate, CompanyView 등).
- `crud.py`: Company 테이블에 대한 CRUD 및 조회 로직.
- `services.py`: 라우터가 호출하는 도메인 서비스 함수.
- `routers.py`: /companies API 엔드포인트 정의.

회사 삭제 시 jobs/reviews 서비스의 관련 데이터는 삭제되지 않습니다.
(서비스 간 이벤트 연동이 도입되기 전까지의 알려진 일관성 공백)
"""

__title__ = "Company Domain"
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "services", "routers"]
