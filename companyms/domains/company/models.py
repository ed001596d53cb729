# companyms/domains/company/models.py

from typing import Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import LargeBinary


class Company(SQLModel, table=True):
    """
    company.companies 테이블 모델을 정의하는 클래스입니다.
    logo_data와 logo_type은 항상 함께 설정되거나 함께 비어 있습니다.
    """
    __tablename__ = "companies"
    __table_args__ = {'schema': 'company'}

    id: Optional[int] = Field(default=None, primary_key=True, description="회사 고유 ID")
    name: str = Field(index=True, max_length=255, description="회사명 (보조 조회 키, 고유하지 않음)")
    description: str = Field(description="회사 설명")
    ceo: str = Field(max_length=255, description="대표자명")
    founded_year: Optional[int] = Field(default=None, index=True, description="설립 연도")

    logo_data: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True), description="로고 이미지 바이너리")
    logo_type: Optional[str] = Field(default=None, max_length=100, description="로고 MIME 타입 (예: image/png)")
