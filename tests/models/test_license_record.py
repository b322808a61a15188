"""Tests for license record models."""

import pytest
from conftest import MIT_RECORD
from pydantic import ValidationError

from oslicense.models.license import LicenseRecord, LicenseTextVersion, sort_summary


class TestLicenseRecord:
    """Tests for LicenseRecord model."""

    def test_parses_registry_record(self) -> None:
        record = LicenseRecord.model_validate(MIT_RECORD)

        assert record.id == "MIT"
        assert record.name == "MIT/Expat License"
        assert record.text == [
            LicenseTextVersion(
                media_type="text/html",
                title="HTML",
                url="https://opensource.org/licenses/mit",
            )
        ]

    def test_ignores_unknown_keys(self) -> None:
        record = LicenseRecord.model_validate({"id": "MIT", "spdx_extra": True})

        assert record.id == "MIT"

    def test_null_unused_fields_are_ignored(self) -> None:
        """Test that nulls in fields the tool never reads don't fail parsing."""
        record = LicenseRecord.model_validate(
            {"id": "MIT", "keywords": None, "links": None, "superseded_by": 3}
        )

        assert record.id == "MIT"

    def test_null_text_means_no_versions(self) -> None:
        record = LicenseRecord.model_validate({"id": "MIT", "text": None})

        assert record.text == []
        assert record.first_text_url is None

    def test_null_text_entries_are_skipped(self) -> None:
        record = LicenseRecord.model_validate(
            {"id": "MIT", "text": [None, {"url": "https://example.com/mit"}]}
        )

        assert record.first_text_url == "https://example.com/mit"

    def test_requires_id(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            LicenseRecord.model_validate({"name": "MIT License"})
        assert any(e["loc"] == ("id",) for e in exc_info.value.errors())

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(ValidationError):
            LicenseRecord(id="")

    def test_is_immutable(self) -> None:
        record = LicenseRecord(id="MIT")
        with pytest.raises(ValidationError):
            record.id = "ISC"  # type: ignore[misc]

    def test_first_text_url(self) -> None:
        record = LicenseRecord.model_validate(
            {
                "id": "MIT",
                "text": [
                    {"url": "https://example.com/first"},
                    {"url": "https://example.com/second"},
                ],
            }
        )
        assert record.first_text_url == "https://example.com/first"

    def test_first_text_url_without_versions(self) -> None:
        assert LicenseRecord(id="MIT").first_text_url is None

    def test_display_name_falls_back_to_id(self) -> None:
        assert LicenseRecord(id="0BSD").display_name == "0BSD"
        assert LicenseRecord(id="MIT", name="MIT License").display_name == "MIT License"


class TestSortSummary:
    """Tests for sort_summary."""

    def test_sorts_ignoring_case(self) -> None:
        summary = {"MIT": "MIT", "apache": "Apache", "BSD": "BSD"}

        assert [license_id for license_id, _ in sort_summary(summary)] == [
            "apache",
            "BSD",
            "MIT",
        ]

    def test_empty(self) -> None:
        assert sort_summary({}) == []
