# companyms/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- JWT(JSON Web Token) 생성(개발용) 및 검증.
- OAuth2 Bearer 스키마를 사용하여 현재 호출자(principal) 획득.
- 역할(role) 기반 권한 가드 팩토리 (require_roles).
- 요청 본문 해석 전에 역할을 검사하는 라우트 클래스 (RoleCheckedRoute).

토큰은 별도의 인증 서비스가 발급하므로, 이 서비스에는 사용자 테이블이 없습니다.
호출자의 신원과 역할은 토큰의 `sub`, `roles` 클레임에서만 읽습니다.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.dependencies.models import Dependant
from fastapi.routing import APIRoute
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel

from companyms.core.config import settings

logger = logging.getLogger(__name__)


class UserRole(str, Enum):
    """
    호출자 역할을 정의하는 Enum 클래스입니다.
    토큰에는 "ADMIN" 또는 Spring 형식의 "ROLE_ADMIN"이 올 수 있습니다.
    """
    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, raw: str) -> Optional["UserRole"]:
        name = raw.strip().upper()
        if name.startswith("ROLE_"):
            name = name[len("ROLE_"):]
        try:
            return cls(name)
        except ValueError:
            return None


class Principal(BaseModel):
    """토큰에서 복원한 호출자 정보"""
    subject: str
    roles: List[UserRole] = []

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return any(role in self.roles for role in roles)


# --- OAuth2 스키마 설정 ---
# 토큰이 없을 때 401 대신 403을 반환하기 위해 auto_error를 끕니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=settings.AUTH_TOKEN_URL, auto_error=False)


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(
    subject: str, roles: Iterable[UserRole], expires_delta: Optional[timedelta] = None
) -> str:
    """
    Access Token을 생성합니다.
    운영 환경의 토큰은 인증 서비스가 발급하며, 이 함수는 개발 CLI와 테스트에서 사용합니다.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": subject,
        "roles": [UserRole(role).value for role in roles],
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Principal:
    """
    JWT 토큰을 디코딩하고 검증하여 Principal을 반환합니다.
    서명/만료 오류 또는 `sub` 누락 시 403 Forbidden을 발생시킵니다.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Could not validate credentials",
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        raise credentials_exception

    subject = payload.get("sub")
    if not subject:
        raise credentials_exception

    raw_roles = payload.get("roles") or []
    if isinstance(raw_roles, str):
        raw_roles = [raw_roles]
    roles = [role for role in (UserRole.parse(str(r)) for r in raw_roles) if role is not None]
    return Principal(subject=subject, roles=roles)


def authenticate(token: Optional[str]) -> Principal:
    """
    Bearer 토큰으로 호출자를 확인합니다.
    토큰이 없거나 유효하지 않으면 403 Forbidden을 발생시킵니다.
    """
    if not token:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authenticated")
    return decode_access_token(token)


def authorize(principal: Principal, roles: Tuple[UserRole, ...]) -> Principal:
    """호출자가 roles 중 하나라도 가지고 있지 않으면 403 Forbidden을 발생시킵니다."""
    if not principal.has_any_role(roles):
        required = " or ".join(role.value for role in roles)
        logger.warning("Principal '%s' lacks role %s.", principal.subject, required)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not enough permissions. {required} role required."
        )
    return principal


async def get_current_principal(token: Optional[str] = Depends(oauth2_scheme)) -> Principal:
    """
    Authorization 헤더의 Bearer 토큰에서 현재 호출자를 가져옵니다.
    """
    return authenticate(token)


# --- 역할 기반 권한 가드 ---
def require_roles(*roles: UserRole) -> Callable[..., Principal]:
    """
    주어진 역할 중 하나 이상을 가진 호출자만 통과시키는 의존성 함수를 만듭니다.
    권한이 없으면 403 Forbidden을 발생시킵니다.
    """
    allowed = tuple(roles)

    async def guard(principal: Principal = Depends(get_current_principal)) -> Principal:
        return authorize(principal, allowed)

    guard.__name__ = f"require_{'_or_'.join(role.value.lower() for role in allowed)}"
    guard.required_roles = allowed
    return guard


# 엔드포인트에서 바로 사용하는 가드 인스턴스
get_current_active_user = require_roles(UserRole.USER, UserRole.ADMIN)
get_current_admin_user = require_roles(UserRole.ADMIN)


def _required_roles(dependant: Dependant) -> Optional[Tuple[UserRole, ...]]:
    for sub_dependant in dependant.dependencies:
        roles = getattr(sub_dependant.call, "required_roles", None)
        if roles is not None:
            return roles
    return None


class RoleCheckedRoute(APIRoute):
    """
    요청 본문과 파라미터를 해석하기 전에 역할 가드를 먼저 실행하는 라우트 클래스입니다.
    권한 없는 호출자는 본문이 잘못되었더라도 400이 아니라 403을 받습니다.
    가드 의존성은 핸들러 실행 시 한 번 더 평가되어 Principal을 주입합니다.
    """

    def get_route_handler(self) -> Callable:
        route_handler = super().get_route_handler()
        roles = _required_roles(self.dependant)
        if roles is None:
            return route_handler

        async def role_checked_route_handler(request: Request) -> Response:
            authorize(authenticate(await oauth2_scheme(request)), roles)
            return await route_handler(request)

        return role_checked_route_handler
