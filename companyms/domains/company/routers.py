# companyms/domains/company/routers.py

"""
'company' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- 조회 엔드포인트는 USER 또는 ADMIN 역할이 필요합니다.
- 생성/수정/삭제/로고 업로드는 ADMIN 역할만 허용됩니다.
정적 경로(/search, /dto/... 등)는 /{company_id}보다 먼저 선언해야 합니다.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Path, Query, Response, UploadFile, status
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.core import dependencies as deps
from . import schemas as company_schemas
from . import services as company_services

logger = logging.getLogger(__name__)

router = APIRouter(
    route_class=deps.RoleCheckedRoute,  # 본문 검증보다 역할 검사가 먼저
    tags=["Company Management (회사 관리)"],
    responses={404: {"description": "Not found"}},
)


# 페이징 상한 (OFFSET = page * page_size)
MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 1000


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")


# =============================================================================
# 1. 목록 / 생성
# =============================================================================
@router.get("", response_model=List[company_schemas.CompanyView], summary="모든 회사 조회")
async def get_all_companies(
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies - Request to get all companies")
    return await company_services.list_companies(db)


@router.post("", response_model=company_schemas.Message, status_code=status.HTTP_201_CREATED, summary="새 회사 생성")
async def create_company(
    company_in: company_schemas.CompanyCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_admin_user),
):
    """
    새로운 회사를 생성합니다.
    - **name**, **description**, **ceo**: 필수, 빈 값 불가
    - **foundedYear**: 선택
    """
    logger.info("POST /companies - Request to create new company: %s", company_in.name)
    db_company = await company_services.create_company(db, company_in)
    logger.info("POST /companies - Company created successfully: %s (ID: %s)", db_company.name, db_company.id)
    return company_schemas.Message(message="Company created", id=db_company.id)


# =============================================================================
# 2. 검색 / 필터 / 정렬 / 페이징
# =============================================================================
@router.get("/search", response_model=List[company_schemas.CompanyView], summary="회사 검색")
async def search_companies(
    query: str = Query(..., min_length=1, description="회사명 또는 설명에 포함된 검색어"),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/search - Request to search companies with query: %s", query)
    return await company_services.search_companies(db, query)


@router.get("/dto/{company_id}", response_model=company_schemas.CompanyView, summary="회사 DTO 조회")
async def get_company_dto_by_id(
    company_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/dto/%s - Request to get company dto", company_id)
    company_view = await company_services.get_company_view(db, company_id)
    if company_view is None:
        logger.warning("GET /companies/dto/%s - Company not found", company_id)
        raise _not_found()
    return company_view


@router.get("/name/{name}", response_model=company_schemas.CompanyView, summary="회사명으로 조회")
async def find_company_by_name(
    name: str,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/name/%s - Request to get company by name", name)
    company_view = await company_services.find_company_by_name(db, name)
    if company_view is None:
        logger.warning("GET /companies/name/%s - Company not found", name)
        raise _not_found()
    return company_view


@router.get("/filterByYear/{year}", response_model=List[company_schemas.CompanyView], summary="설립 연도로 필터")
async def get_companies_by_year(
    year: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/filterByYear/%s - Request to filter companies by year", year)
    return await company_services.find_companies_by_founded_year(db, year)


@router.get("/sorted/{field}", response_model=List[company_schemas.CompanyRead], summary="정렬된 회사 목록")
async def find_sorted_companies(
    field: company_schemas.SortField,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    """
    지정한 필드 기준 오름차순으로 정렬된 회사 목록을 반환합니다.
    허용 필드: id, name, description, ceo, foundedYear (그 외는 400)
    """
    logger.info("GET /companies/sorted/%s - Request to get sorted companies", field.value)
    return await company_services.find_companies_with_sorting(db, field)


@router.get(
    "/pagination/{page}/{page_size}",
    response_model=company_schemas.CompanyPage,
    summary="페이지 단위 회사 목록",
)
async def get_companies_with_pagination(
    page: int = Path(..., ge=0, le=MAX_PAGE, description="0부터 시작하는 페이지 번호"),
    page_size: int = Path(..., ge=1, le=MAX_PAGE_SIZE, description="페이지 크기"),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/pagination/%s/%s - Request to get paginated companies", page, page_size)
    return await company_services.find_companies_with_pagination(db, page, page_size)


# =============================================================================
# 3. 로고 업로드 / 다운로드
# =============================================================================
@router.post("/{company_id}/logo", response_model=company_schemas.Message, summary="회사 로고 업로드")
async def upload_logo(
    company_id: int,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_admin_user),
):
    logger.info("POST /companies/%s/logo - Request to upload logo (%s)", company_id, file.content_type)
    await company_services.store_logo(db, company_id, file)
    return company_schemas.Message(message="Logo uploaded successfully", id=company_id)


@router.get(
    "/{company_id}/logo",
    response_class=Response,
    responses={200: {"content": {"image/*": {}}, "description": "로고 바이너리"}},
    summary="회사 로고 다운로드",
)
async def download_logo(
    company_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    logger.info("GET /companies/%s/logo - Request to download logo", company_id)
    logo = await company_services.get_logo(db, company_id)
    if logo is None:
        logger.warning("GET /companies/%s/logo - Logo or company not found", company_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Logo not found")
    logo_data, logo_type = logo
    return Response(content=logo_data, media_type=logo_type)


# =============================================================================
# 4. 단건 조회 / 수정 / 삭제
# =============================================================================
@router.get("/{company_id}", response_model=company_schemas.CompanyRead, summary="회사 엔티티 조회")
async def get_company_by_id(
    company_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_active_user),
):
    """
    로고를 포함한 전체 회사 엔티티를 조회합니다.
    jobms 등 다른 서비스가 회사 존재 여부를 확인할 때 사용합니다.
    """
    logger.info("GET /companies/%s - (Internal) Request to get company entity", company_id)
    db_company = await company_services.get_company(db, company_id)
    if db_company is None:
        logger.warning("GET /companies/%s - Company entity not found", company_id)
        raise _not_found()
    return db_company


@router.put("/{company_id}", response_model=company_schemas.Message, summary="회사 정보 수정")
async def update_company(
    company_id: int,
    company_in: company_schemas.CompanyUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_admin_user),
):
    """
    회사 정보를 요청 본문으로 전부 교체합니다 (부분 수정 없음). 로고는 유지됩니다.
    """
    logger.info("PUT /companies/%s - Request to update company", company_id)
    if not await company_services.update_company(db, company_id, company_in):
        logger.warning("PUT /companies/%s - Company not found", company_id)
        raise _not_found()
    return company_schemas.Message(message="Company updated", id=company_id)


@router.delete("/{company_id}", response_model=company_schemas.Message, summary="회사 삭제")
async def delete_company_by_id(
    company_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: deps.Principal = Depends(deps.get_current_admin_user),
):
    logger.info("DELETE /companies/%s - Request to delete company", company_id)
    if not await company_services.delete_company(db, company_id):
        logger.warning("DELETE /companies/%s - Company not found", company_id)
        raise _not_found()
    return company_schemas.Message(message="Company deleted", id=company_id)
