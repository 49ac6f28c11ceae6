"""Tests for next_semver.coerce."""

from __future__ import annotations

import pytest

from next_semver.coerce import normalize


class TestNormalize:
    def test_major_only(self) -> None:
        assert normalize("1") == "1.0.0"

    def test_major_minor(self) -> None:
        assert normalize("1.2") == "1.2.0"

    def test_full_version_unchanged(self) -> None:
        assert normalize("1.2.3") == "1.2.3"

    def test_strips_leading_v(self) -> None:
        assert normalize("v1.2.3-beta") == "1.2.3-beta"

    def test_collapses_leading_zeros(self) -> None:
        assert normalize("01.02.03") == "1.2.3"
        assert normalize("007") == "7.0.0"

    def test_partial_with_prerelease(self) -> None:
        assert normalize("v1.2-rc.1") == "1.2.0-rc.1"

    def test_keeps_build_metadata(self) -> None:
        assert normalize("1.2.3+build.01") == "1.2.3+build.01"

    def test_leaves_prerelease_untouched(self) -> None:
        """Only the numeric leader is rewritten."""
        assert normalize("1.02.3-beta.01") == "1.2.3-beta.01"

    def test_extra_component_passes_through(self) -> None:
        assert normalize("1.2.3.4") == "1.2.3.4"

    @pytest.mark.parametrize("raw", ["not-a-version", "", "v", "V1.2.3", "vv1"])
    def test_no_numeric_prefix_unchanged(self, raw: str) -> None:
        assert normalize(raw) == raw

    def test_large_numbers_keep_precision(self) -> None:
        assert normalize("v0099999999999999999999") == "99999999999999999999.0.0"

    @pytest.mark.parametrize(
        "raw", ["1", "v1.2", "01.02.03", "1.2.3-beta", "v007.1-rc+b", "1.2.3.4"]
    )
    def test_idempotent(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once

    def test_numerals_beyond_int_conversion_limit(self) -> None:
        assert normalize("1" * 5000) == "1" * 5000 + ".0.0"
        assert normalize("v" + "0" * 5000 + ".02") == "0.2.0"
