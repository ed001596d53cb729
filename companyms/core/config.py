# companyms/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Company Microservice"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Company resource service for the job portal microservices"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode (SQL echo)")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ...)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async database connection URL (postgresql+asyncpg://...)")
    DB_POOL_SIZE: int = Field(10, description="Minimum number of pooled connections")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed above the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds after which a pooled connection is recycled")

    # --- JWT (JSON Web Token) 설정 ---
    # 토큰은 별도의 인증 서비스가 발급하며, 이 서비스는 서명과 역할만 검증합니다.
    SECRET_KEY: SecretStr = Field(..., description="Shared secret used to verify JWT signatures")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, description="Lifetime of development tokens issued by the CLI")
    AUTH_TOKEN_URL: str = Field("/auth/token", description="Token endpoint of the auth service (OpenAPI docs only)")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    # --- 로고 업로드 설정 ---
    MAX_LOGO_SIZE_BYTES: int = Field(2 * 1024 * 1024, description="Maximum accepted logo size in bytes")


settings = Settings()
