"""Tests for the TransportResult value object."""

import pytest
from pydantic import ValidationError

from n8n_bridge.transport.domain.result import TransportResult


class TestTransportResult:
    def test_success_may_have_empty_content(self) -> None:
        result = TransportResult(success=True, content="")
        assert result.content == ""

    def test_failure_requires_diagnostic(self) -> None:
        with pytest.raises(ValidationError):
            TransportResult(success=False, content="")

    def test_failure_rejects_missing_content(self) -> None:
        with pytest.raises(ValidationError):
            TransportResult(success=False)

    def test_is_frozen(self) -> None:
        result = TransportResult(success=True, content="body")
        with pytest.raises(ValidationError):
            result.content = "other"  # type: ignore[misc]
