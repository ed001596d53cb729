# companyms/__init__.py

"""
Company 마이크로서비스(companyms)의 메인 패키지입니다.

FastAPI 애플리케이션의 진입점 (main.py)과
설정, 데이터베이스 연결, 보안 유틸리티를 담는 core 서브패키지,
그리고 Company 리소스를 구현하는 domains 서브패키지로 구성됩니다.
애플리케이션 이름과 버전 같은 설정값은 companyms.core.config.settings에 있습니다.
"""

RESOURCE_PREFIX = "/companies"  # Company 리소스 라우트의 공통 접두사 (main.py에서 적용)

__version__ = "0.1.0"
__title__ = "companyms"
__description__ = "Company resource service (CRUD, search, pagination, logo storage)."
__all__ = []
