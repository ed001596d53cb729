# companyms/domains/company/schemas.py

"""
'company' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

JSON 필드명은 다른 마이크로서비스(jobms, reviewms)와 맞추기 위해 camelCase를 사용하며,
파이썬 속성명은 snake_case를 유지합니다. 입력은 두 형식 모두 허용합니다.
"""

import base64
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,  # ORM 모드 활성화
    )


# 빈 값 검증 메시지 (필드별)
EMPTY_FIELD_MESSAGES = {
    "name": "Company name cannot be empty",
    "description": "Company description cannot be empty",
    "ceo": "CEO name cannot be empty",
}


# =============================================================================
# 1. 요청 스키마
# =============================================================================
class CompanyBase(CamelModel):
    """
    회사 생성/수정 요청의 공통 필드입니다.
    name, description, ceo는 필수이며 공백만으로 이루어질 수 없습니다.
    """
    name: str = Field(..., max_length=255, description="회사명")
    description: str = Field(..., description="회사 설명")
    ceo: str = Field(..., max_length=255, description="대표자명")
    founded_year: Optional[int] = Field(None, description="설립 연도")

    @field_validator("name", "description", "ceo")
    @classmethod
    def check_not_empty(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(EMPTY_FIELD_MESSAGES[info.field_name])
        return value


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(CompanyBase):
    """
    회사 정보 수정 요청입니다. 부분 수정이 아니라 모든 필드를 교체합니다.
    foundedYear를 생략하면 null로 저장됩니다.
    """
    pass


# =============================================================================
# 2. 응답 스키마
# =============================================================================
class CompanyView(CamelModel):
    """목록/검색 응답용 경량 DTO (로고 바이너리 제외)"""
    id: int
    name: str
    description: str
    ceo: str
    founded_year: Optional[int] = None


class CompanyRead(CompanyView):
    """
    로고를 포함한 전체 엔티티 응답입니다 (서비스 간 조회용).
    logoData는 JSON에서 표준 base64 문자열(+, / 사용)로 직렬화됩니다.
    """
    logo_data: Optional[bytes] = None
    logo_type: Optional[str] = None

    @field_serializer("logo_data", when_used="json")
    def serialize_logo_data(self, logo_data: Optional[bytes]) -> Optional[str]:
        if logo_data is None:
            return None
        return base64.b64encode(logo_data).decode("ascii")


class CompanyPage(CamelModel):
    """페이지 응답 (page는 0부터 시작)"""
    content: List[CompanyRead]
    page: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool


class Message(CamelModel):
    """변경 작업의 결과 메시지"""
    message: str
    id: Optional[int] = None


# =============================================================================
# 3. 정렬 필드
# =============================================================================
class SortField(str, Enum):
    """
    /companies/sorted/{field}에서 허용하는 정렬 필드입니다.
    값은 JSON 필드명이며, column 속성은 모델의 속성명입니다.
    """
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    CEO = "ceo"
    FOUNDED_YEAR = "foundedYear"

    @property
    def column(self) -> str:
        return {
            SortField.ID: "id",
            SortField.NAME: "name",
            SortField.DESCRIPTION: "description",
            SortField.CEO: "ceo",
            SortField.FOUNDED_YEAR: "founded_year",
        }[self]
