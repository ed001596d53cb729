# companyms/domains/company/services.py

"""
'company' 도메인의 비즈니스 로직을 담당하는 서비스 모듈입니다.

모든 함수는 요청 단위 세션(AsyncSession)을 첫 번째 인자로 전달받습니다.
조회 결과가 없으면 None/False를 반환하며, 상태 코드 매핑은 라우터가 담당합니다.
단, 로고 업로드는 단계별 오류(404/400/500)를 여기서 직접 HTTPException으로 발생시킵니다.
"""

import logging
import math
from typing import List, Optional, Tuple

from fastapi import HTTPException, UploadFile, status
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.core.config import settings
from . import crud, models, schemas

logger = logging.getLogger(__name__)

DEFAULT_LOGO_TYPE = "application/octet-stream"


async def list_companies(db: AsyncSession) -> List[schemas.CompanyView]:
    companies = await crud.company.get_multi(db)
    return [schemas.CompanyView.model_validate(c) for c in companies]


async def get_company(db: AsyncSession, company_id: int) -> Optional[models.Company]:
    return await crud.company.get(db, id=company_id)


async def get_company_view(db: AsyncSession, company_id: int) -> Optional[schemas.CompanyView]:
    db_company = await crud.company.get(db, id=company_id)
    if db_company is None:
        return None
    return schemas.CompanyView.model_validate(db_company)


async def find_company_by_name(db: AsyncSession, name: str) -> Optional[schemas.CompanyView]:
    db_company = await crud.company.get_by_name(db, name=name)
    if db_company is None:
        return None
    return schemas.CompanyView.model_validate(db_company)


async def search_companies(db: AsyncSession, query: str) -> List[schemas.CompanyView]:
    companies = await crud.company.search(db, query=query)
    return [schemas.CompanyView.model_validate(c) for c in companies]


async def find_companies_by_founded_year(db: AsyncSession, year: int) -> List[schemas.CompanyView]:
    companies = await crud.company.get_by_founded_year(db, year=year)
    return [schemas.CompanyView.model_validate(c) for c in companies]


async def find_companies_with_sorting(db: AsyncSession, field: schemas.SortField) -> List[models.Company]:
    return await crud.company.get_sorted(db, field=field)


async def find_companies_with_pagination(db: AsyncSession, page: int, page_size: int) -> schemas.CompanyPage:
    """
    0부터 시작하는 page 번호로 한 페이지를 조회합니다.
    page_size는 라우터에서 1 이상으로 검증됩니다.
    """
    if page < 0 or page_size <= 0:
        raise ValueError("page must be >= 0 and page_size must be > 0")

    items, total = await crud.company.get_page(db, page=page, page_size=page_size)
    total_pages = math.ceil(total / page_size)
    return schemas.CompanyPage(
        content=[schemas.CompanyRead.model_validate(c) for c in items],
        page=page,
        page_size=page_size,
        total_elements=total,
        total_pages=total_pages,
        first=page == 0,
        last=page >= total_pages - 1,
    )


async def create_company(db: AsyncSession, company_in: schemas.CompanyCreate) -> models.Company:
    return await crud.company.create(db, obj_in=company_in)


async def update_company(db: AsyncSession, company_id: int, company_in: schemas.CompanyUpdate) -> bool:
    """
    요청의 모든 필드로 기존 회사 정보를 교체합니다. 대상이 없으면 False.
    """
    db_company = await crud.company.get(db, id=company_id)
    if db_company is None:
        return False
    #  dict로 넘겨 생략된 founded_year도 None으로 덮어씁니다.
    await crud.company.update(db, db_obj=db_company, obj_in=company_in.model_dump())
    return True


async def delete_company(db: AsyncSession, company_id: int) -> bool:
    deleted = await crud.company.delete(db, id=company_id)
    if deleted is None:
        return False
    # TODO: jobms/reviewms가 구독할 company-deleted 이벤트 발행 (메시징 연동 후)
    logger.warning(
        "Company %s deleted; related jobs and reviews in other services are not removed.", company_id
    )
    return True


async def store_logo(db: AsyncSession, company_id: int, upload_file: UploadFile) -> models.Company:
    """
    업로드된 파일을 회사 로고로 저장합니다.
    - 회사가 없으면 404, 파일을 읽을 수 없으면 500, 비어 있거나 너무 크면 400.
    """
    db_company = await crud.company.get(db, id=company_id)
    if db_company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")

    try:
        logo_data = await upload_file.read()
    except OSError as e:
        logger.error("Could not read logo stream for company %s: %s", company_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not upload file: {e}",
        )
    finally:
        await upload_file.close()

    if not logo_data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")
    if len(logo_data) > settings.MAX_LOGO_SIZE_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Logo exceeds the maximum size of {settings.MAX_LOGO_SIZE_BYTES} bytes",
        )

    logo_type = upload_file.content_type or DEFAULT_LOGO_TYPE
    return await crud.company.set_logo(db, db_obj=db_company, logo_data=logo_data, logo_type=logo_type)


async def get_logo(db: AsyncSession, company_id: int) -> Optional[Tuple[bytes, str]]:
    """(logo_data, logo_type)을 반환합니다. 회사나 로고가 없으면 None."""
    db_company = await crud.company.get(db, id=company_id)
    if db_company is None or db_company.logo_data is None:
        return None
    return db_company.logo_data, db_company.logo_type or DEFAULT_LOGO_TYPE
