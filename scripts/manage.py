# flake8: noqa
# scripts/manage.py

"""
개발/운영 보조 CLI입니다.

    python scripts/manage.py init-db
    python scripts/manage.py issue-token --subject alice --role ADMIN
"""

import asyncio
from datetime import timedelta
from typing import List, Optional

import typer

from companyms.core.security import UserRole, create_access_token

cli = typer.Typer(help="companyms management commands")


@cli.command("init-db")
def init_db():
    """
    'company' 스키마와 테이블을 생성합니다 (개발용, 운영은 Alembic 사용).
    """
    # 엔진 생성 시 DATABASE_URL이 필요하므로 명령 실행 시점에 임포트합니다.
    from companyms.core.database import create_db_and_tables, engine

    async def _run() -> None:
        try:
            await create_db_and_tables()
        finally:
            await engine.dispose()

    asyncio.run(_run())
    typer.echo("데이터베이스 스키마와 테이블이 준비되었습니다.")


@cli.command("issue-token")
def issue_token(
    subject: str = typer.Option(..., "--subject", "-s", help="토큰의 sub 클레임 (사용자 식별자)"),
    role: List[UserRole] = typer.Option(..., "--role", "-r", help="부여할 역할 (여러 번 지정 가능)"),
    minutes: Optional[int] = typer.Option(None, "--minutes", "-m", min=1, help="만료 시간(분). 생략 시 설정값 사용"),
):
    """
    서비스의 SECRET_KEY로 서명된 개발용 Access Token을 출력합니다.
    """
    expires = timedelta(minutes=minutes) if minutes else None
    typer.echo(create_access_token(subject, role, expires_delta=expires))


if __name__ == "__main__":
    cli()
