# tests/domains/__init__.py

"""
도메인별 테스트 패키지입니다.

- `test_company_n.py`: 'company' 도메인 HTTP 엔드포인트 통합 테스트.
- `test_company_crud.py`: CRUD/서비스 계층 단위 테스트.
"""

__all__ = []
