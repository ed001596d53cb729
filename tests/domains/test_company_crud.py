# tests/domains/test_company_crud.py

"""
'company' 도메인의 CRUD 및 서비스 계층을 직접 호출하는 단위 테스트 모듈입니다.
"""

import pytest
from fastapi import HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from companyms.domains.company import crud, schemas, services


class BrokenUpload:
    """read() 도중 입출력 오류가 나는 업로드 파일"""
    content_type = "image/png"

    def __init__(self):
        self.closed = False

    async def read(self) -> bytes:
        raise OSError("stream reset")

    async def close(self) -> None:
        self.closed = True


class BytesUpload:
    def __init__(self, data: bytes, content_type=None):
        self.data = data
        self.content_type = content_type
        self.closed = False

    async def read(self) -> bytes:
        return self.data

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_get_filtered_rejects_unknown_attribute(db_session: AsyncSession):
    with pytest.raises(ValueError):
        await crud.company.get_filtered(db_session, filters={"no_such_column": 1})

    with pytest.raises(ValueError):
        await crud.company.get_filtered(db_session, order_by_field="logo_size")


@pytest.mark.asyncio
async def test_get_by_name_returns_lowest_id_on_duplicates(db_session: AsyncSession, company_factory):
    first = await company_factory("Twin")
    await company_factory("Twin")

    found = await crud.company.get_by_name(db_session, name="Twin")
    assert found.id == first.id
    assert await crud.company.get_by_name(db_session, name="twin") is None


@pytest.mark.asyncio
async def test_get_sorted_breaks_ties_by_id(db_session: AsyncSession, company_factory):
    a = await company_factory("Zeta", founded_year=2000)
    b = await company_factory("Alpha", founded_year=2000)

    result = await crud.company.get_sorted(db_session, field=schemas.SortField.FOUNDED_YEAR)
    assert [c.id for c in result] == [a.id, b.id]


@pytest.mark.asyncio
async def test_pagination_metadata(db_session: AsyncSession, company_factory):
    for i in range(5):
        await company_factory(f"Company {i}")

    first_page = await services.find_companies_with_pagination(db_session, page=0, page_size=2)
    assert first_page.total_elements == 5
    assert first_page.total_pages == 3
    assert first_page.first is True and first_page.last is False

    last_page = await services.find_companies_with_pagination(db_session, page=2, page_size=2)
    assert len(last_page.content) == 1
    assert last_page.first is False and last_page.last is True


@pytest.mark.asyncio
async def test_pagination_on_empty_table(db_session: AsyncSession):
    page = await services.find_companies_with_pagination(db_session, page=0, page_size=10)
    assert page.content == []
    assert page.total_pages == 0
    assert page.first is True and page.last is True


@pytest.mark.asyncio
async def test_pagination_rejects_invalid_arguments(db_session: AsyncSession):
    with pytest.raises(ValueError):
        await services.find_companies_with_pagination(db_session, page=-1, page_size=10)
    with pytest.raises(ValueError):
        await services.find_companies_with_pagination(db_session, page=0, page_size=0)


@pytest.mark.asyncio
async def test_store_logo_read_failure_returns_500(db_session: AsyncSession, test_company):
    upload = BrokenUpload()

    with pytest.raises(HTTPException) as exc_info:
        await services.store_logo(db_session, test_company.id, upload)

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Could not upload file: stream reset"
    assert upload.closed

    # 기존 로고 상태는 바뀌지 않아야 합니다.
    assert await services.get_logo(db_session, test_company.id) is None


@pytest.mark.asyncio
async def test_store_logo_defaults_content_type(db_session: AsyncSession, test_company):
    await services.store_logo(db_session, test_company.id, BytesUpload(b"\x89PNG"))

    logo = await services.get_logo(db_session, test_company.id)
    assert logo == (b"\x89PNG", services.DEFAULT_LOGO_TYPE)


@pytest.mark.asyncio
async def test_store_logo_rejects_oversized_file(db_session: AsyncSession, test_company, monkeypatch):
    monkeypatch.setattr(services.settings, "MAX_LOGO_SIZE_BYTES", 4)

    with pytest.raises(HTTPException) as exc_info:
        await services.store_logo(db_session, test_company.id, BytesUpload(b"12345", "image/png"))

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_store_logo_replaces_previous_logo(db_session: AsyncSession, company_factory):
    company = await company_factory("Logo", logo_data=b"old", logo_type="image/gif")

    await services.store_logo(db_session, company.id, BytesUpload(b"new", "image/png"))

    assert await services.get_logo(db_session, company.id) == (b"new", "image/png")


@pytest.mark.asyncio
async def test_delete_company_returns_false_for_unknown_id(db_session: AsyncSession):
    assert await services.delete_company(db_session, 12345) is False
