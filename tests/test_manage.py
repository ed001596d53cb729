# tests/test_manage.py

"""
scripts/manage.py CLI 명령에 대한 테스트입니다.
"""

import os
import sys

from typer.testing import CliRunner

from companyms.core.security import UserRole, decode_access_token

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "scripts")))

import manage  # noqa: E402

runner = CliRunner()


def test_issue_token_outputs_decodable_token():
    result = runner.invoke(manage.cli, ["issue-token", "--subject", "alice", "--role", "ADMIN", "--role", "USER"])

    assert result.exit_code == 0, result.output
    principal = decode_access_token(result.output.strip())
    assert principal.subject == "alice"
    assert principal.roles == [UserRole.ADMIN, UserRole.USER]


def test_issue_token_rejects_unknown_role():
    result = runner.invoke(manage.cli, ["issue-token", "-s", "alice", "-r", "GUEST"])

    assert result.exit_code != 0
