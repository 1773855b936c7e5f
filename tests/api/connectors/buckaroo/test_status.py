"""Testes para api.connectors.buckaroo.status."""

from __future__ import annotations

import pytest

from api.connectors.buckaroo.models import ResponseStatus
from api.connectors.buckaroo.status import StatusOutcome, classify_status


def _status(code: str, sub_code: str = "") -> ResponseStatus:
    return ResponseStatus.model_validate(
        {"Code": {"Description": code}, "SubCode": {"Description": sub_code}}
    )


class TestClassifyStatus:
    """Testes para classify_status."""

    @pytest.mark.parametrize(
        ("code", "sub_code", "expected"),
        [
            ("Success", "", StatusOutcome.SUCCESS),
            ("Success", "The debtor is not found", StatusOutcome.SUCCESS),
            ("Pending input", "", StatusOutcome.PENDING_INPUT),
            ("Failed", "The debtor is not found.", StatusOutcome.DEBTOR_NOT_FOUND),
            ("Failed", "Invalid configuration code", StatusOutcome.FAILURE),
            ("Validation failure", "", StatusOutcome.FAILURE),
            ("", "", StatusOutcome.FAILURE),
        ],
    )
    def test_classification(self, code: str, sub_code: str, expected: StatusOutcome) -> None:
        assert classify_status(_status(code, sub_code)) is expected

    def test_substring_match(self) -> None:
        """Descrições mais longas ainda casam pelo marcador."""
        assert classify_status(_status("Request Success (190)")) is StatusOutcome.SUCCESS

    def test_match_is_case_sensitive(self) -> None:
        assert classify_status(_status("success")) is StatusOutcome.FAILURE

    def test_null_sub_code(self) -> None:
        """SubCode null do provider é tratado como descrição vazia."""
        status = ResponseStatus.model_validate(
            {"Code": {"Code": 190, "Description": "Success"}, "SubCode": None}
        )
        assert status.sub_code is None
        assert status.sub_description == ""
        assert classify_status(status) is StatusOutcome.SUCCESS

    def test_null_descriptions_are_failure(self) -> None:
        status = ResponseStatus.model_validate(
            {"Code": {"Description": None}, "SubCode": {"Description": None}}
        )
        assert classify_status(status) is StatusOutcome.FAILURE
