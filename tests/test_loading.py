"""Tests for bundle locators and load results."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from i18nassets.diagnostics import BundleLoadError, DiagnosticCode
from i18nassets.enums import LoadStatus
from i18nassets.localization import (
    BundleLoadResult,
    BundleResourceLocator,
    MappingBundleLocator,
    PathBundleLocator,
)


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "i18n"
    directory.mkdir()
    (directory / "messages.properties").write_text("foo.foo = Test\n", encoding="utf-8")
    (directory / "messages_de.properties").write_text("foo.foo = Prüfung\n", encoding="utf-8")
    return directory


class TestPathBundleLocator:
    """Filesystem bundle lookup."""

    def test_reads_locale_bundle(self, bundle_dir: Path) -> None:
        locator = PathBundleLocator(str(bundle_dir))
        assert locator.get_bundle("de") == "foo.foo = Prüfung\n"

    def test_reads_base_bundle(self, bundle_dir: Path) -> None:
        locator = PathBundleLocator(str(bundle_dir))
        assert locator.get_bundle("") == "foo.foo = Test\n"

    def test_missing_bundle_is_none(self, bundle_dir: Path) -> None:
        """Absence is not an error."""
        assert PathBundleLocator(str(bundle_dir)).get_bundle("fr") is None

    def test_missing_directory_is_none(self, tmp_path: Path) -> None:
        assert PathBundleLocator(str(tmp_path / "nowhere")).get_bundle("") is None

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [("", "messages.properties"), ("de", "messages_de.properties"), ("pt_BR", "messages_pt_BR.properties")],
    )
    def test_file_name(self, locale: str, expected: str) -> None:
        assert PathBundleLocator().file_name(locale) == expected

    def test_custom_naming(self, tmp_path: Path) -> None:
        (tmp_path / "labels_fr.txt").write_text("a = b", encoding="utf-8")
        locator = PathBundleLocator(str(tmp_path), basename="labels", extension=".txt")
        assert locator.get_bundle("fr") == "a = b"

    def test_describe_path(self) -> None:
        locator = PathBundleLocator("grails-app/i18n/")
        assert locator.describe_path("de") == "grails-app/i18n/messages_de.properties"

    @pytest.mark.parametrize("locale", ["../etc", "de/..", "a/b", "a\\b", ".."])
    def test_unsafe_locale_rejected(self, bundle_dir: Path, locale: str) -> None:
        with pytest.raises(ValueError, match="not allowed in locale"):
            PathBundleLocator(str(bundle_dir)).get_bundle(locale)

    def test_undecodable_bundle(self, bundle_dir: Path) -> None:
        (bundle_dir / "messages_fr.properties").write_bytes(b"foo = \xff\xfe")
        with pytest.raises(BundleLoadError) as exc_info:
            PathBundleLocator(str(bundle_dir)).get_bundle("fr")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.BUNDLE_DECODE_FAILED
        assert exc_info.value.path.endswith("messages_fr.properties")

    def test_latin1_encoding(self, bundle_dir: Path) -> None:
        (bundle_dir / "messages_fr.properties").write_bytes("a = é".encode("latin-1"))
        locator = PathBundleLocator(str(bundle_dir), encoding="latin-1")
        assert locator.get_bundle("fr") == "a = é"

    def test_oversized_bundle(self, bundle_dir: Path) -> None:
        locator = PathBundleLocator(str(bundle_dir), max_size=4)
        with pytest.raises(BundleLoadError) as exc_info:
            locator.get_bundle("")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.BUNDLE_TOO_LARGE

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_unreadable_bundle(self, bundle_dir: Path) -> None:
        target = bundle_dir / "messages_de.properties"
        target.chmod(0)
        try:
            with pytest.raises(BundleLoadError) as exc_info:
                PathBundleLocator(str(bundle_dir)).get_bundle("de")
        finally:
            target.chmod(0o644)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.BUNDLE_READ_FAILED

    @pytest.mark.parametrize("basename", ["", "a/b", "a\\b"])
    def test_invalid_basename(self, basename: str) -> None:
        with pytest.raises(ValueError, match="basename"):
            PathBundleLocator(basename=basename)

    def test_invalid_max_size(self) -> None:
        with pytest.raises(ValueError, match="max_size"):
            PathBundleLocator(max_size=0)

    def test_satisfies_protocol(self) -> None:
        locator: BundleResourceLocator = PathBundleLocator()
        assert callable(locator.get_bundle)


class TestMappingBundleLocator:
    """In-memory bundle lookup."""

    def test_lookup(self) -> None:
        locator = MappingBundleLocator({"": "a = 1", "de": "a = 2"})
        assert locator.get_bundle("") == "a = 1"
        assert locator.get_bundle("de") == "a = 2"
        assert locator.get_bundle("fr") is None

    def test_default_is_empty(self) -> None:
        assert MappingBundleLocator().get_bundle("") is None

    def test_describe_path(self) -> None:
        locator = MappingBundleLocator()
        assert locator.describe_path("de") == "memory:de"
        assert locator.describe_path("") == "memory:<base>"


class TestBundleLoadResult:
    def test_status_flags(self) -> None:
        found = BundleLoadResult("de", LoadStatus.FOUND, "x", entry_count=3)
        missing = BundleLoadResult("fr", LoadStatus.NOT_FOUND, "y")
        assert found.is_found
        assert not missing.is_found
        assert missing.entry_count == 0
        assert missing.skipped_lines == ()
