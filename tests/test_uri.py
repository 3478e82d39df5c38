"""
Tests for file URI / path conversion.
"""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from avpath.exceptions import MalformedUriError
from avpath.types import AuthorityStyle, MalformedUriReason
from avpath.uri import (
    file_uri_to_path,
    is_file_uri,
    is_http_uri,
    parse_file_uri,
    path_to_file_uri,
    split_root,
)


class TestSchemeDetection:
    """Test is_file_uri and is_http_uri."""

    def test_file_uri_exact_casings(self) -> None:
        assert is_file_uri("file://fnord")
        assert is_file_uri("FILE://fnord")

    def test_file_uri_rejects_other_forms(self) -> None:
        assert not is_file_uri("file:fnord")
        assert not is_file_uri("http://fnord")
        assert not is_file_uri("/fnord/something")
        assert not is_file_uri("File://fnord")

    def test_file_uri_short_input(self) -> None:
        """Inputs shorter than the prefix are simply false."""
        assert not is_file_uri("")
        assert not is_file_uri("file:/")

    def test_http_uri_any_case(self) -> None:
        for uri in ["http://a.com", "https://a.com", "HTTP://a.com", "HtTpS://a.com/x"]:
            assert is_http_uri(uri)
            assert not is_file_uri(uri)

    def test_http_uri_rejects_other_schemes(self) -> None:
        assert not is_http_uri("ftp://a.com")
        assert not is_http_uri("file:///c:/a")
        assert not is_http_uri("http:/a.com")
        assert not is_http_uri("")


class TestFileUriToPath:
    """Test file_uri_to_path and parse_file_uri."""

    def test_drive_path(self) -> None:
        assert file_uri_to_path("file:///c:/somepath/somefile.ext") == "c:/somepath/somefile.ext"
        assert file_uri_to_path("FILE:///C:/a/b.ext") == "C:/a/b.ext"

    def test_posix_absolute_path_keeps_root(self) -> None:
        assert file_uri_to_path("file:///home/user/f.txt") == "/home/user/f.txt"

    def test_authority_unc_style(self) -> None:
        path = file_uri_to_path("file://fnord/somepath/somefile.ext", AuthorityStyle.UNC)
        assert path == "//fnord/somepath/somefile.ext"

    def test_authority_plain_style(self) -> None:
        path = file_uri_to_path("file://fnord/somepath/somefile.ext", AuthorityStyle.PLAIN_PREFIX)
        assert path == "/fnord/somepath/somefile.ext"

    def test_authority_uses_configured_style(self, mock_env_vars: dict[str, str]) -> None:
        """mock_env_vars selects UNC."""
        assert file_uri_to_path("file://host/some/path") == "//host/some/path"

    def test_authority_style_from_env(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AVPATH_AUTHORITY_STYLE", "plain")
        assert file_uri_to_path("file://host/some/path") == "/host/some/path"

    def test_four_slash_unc(self) -> None:
        assert file_uri_to_path("file:////host/share/f") == "//host/share/f"

    def test_too_short_is_soft_failure(self) -> None:
        assert file_uri_to_path("file://") == ""
        assert file_uri_to_path("") == ""

        result = parse_file_uri("file:x")
        assert not result.ok
        assert not result
        assert result.reason == MalformedUriReason.TOO_SHORT
        assert result.path == ""

    def test_wrong_scheme_is_soft_failure(self) -> None:
        assert file_uri_to_path("http://a.com/b") == ""

        result = parse_file_uri("http://a.com/b")
        assert result.reason == MalformedUriReason.WRONG_SCHEME

    def test_successful_result(self) -> None:
        result = parse_file_uri("file:///c:/a/b.ext")
        assert result.ok
        assert result
        assert result.reason is None
        assert result.unwrap() == "c:/a/b.ext"
        assert result.to_dict() == {"uri": "file:///c:/a/b.ext", "path": "c:/a/b.ext", "reason": None}

    def test_unwrap_failure_raises(self) -> None:
        with pytest.raises(MalformedUriError) as exc_info:
            parse_file_uri("nope://x/y").unwrap()

        assert exc_info.value.context["reason"] == "wrong_scheme"
        assert exc_info.value.context["uri"] == "nope://x/y"


class TestSplitRoot:
    """Test split_root decomposition."""

    def test_drive(self) -> None:
        parts = split_root("c:/a/b.ext")
        assert parts.root_name == "c:"
        assert parts.root_directory == "/"
        assert parts.relative_path == "a/b.ext"
        assert not parts.is_unc

    def test_unc_host(self) -> None:
        parts = split_root("//host/a/b.ext")
        assert parts.root_name == "//host"
        assert parts.relative_path == "a/b.ext"
        assert parts.is_unc

    def test_backslash_unc_host(self) -> None:
        parts = split_root("\\\\host\\a")
        assert parts.root_name == "\\\\host"
        assert parts.is_unc

    def test_posix_absolute(self) -> None:
        parts = split_root("/usr/lib")
        assert parts.root_name == ""
        assert parts.root_directory == "/"
        assert parts.relative_path == "usr/lib"

    def test_relative(self) -> None:
        parts = split_root("a/b")
        assert not parts.has_root_name
        assert parts.root_directory == ""
        assert parts.relative_path == "a/b"

    def test_drive_relative(self) -> None:
        parts = split_root("c:a")
        assert parts.root_name == "c:"
        assert parts.root_directory == ""
        assert parts.relative_path == "a"


class TestPathToFileUri:
    """Test path_to_file_uri."""

    def test_drive_path(self) -> None:
        assert path_to_file_uri("c:/somepath/somefile.ext") == "file:///c:/somepath/somefile.ext"

    def test_unc_path(self) -> None:
        assert path_to_file_uri("//fnord/somepath/somefile.ext") == "file://fnord/somepath/somefile.ext"

    def test_backslashes_normalized(self) -> None:
        assert path_to_file_uri("C:\\dir\\file.txt") == "file:///C:/dir/file.txt"
        assert path_to_file_uri("\\\\host\\share\\f.txt") == "file://host/share/f.txt"

    def test_posix_absolute(self) -> None:
        assert path_to_file_uri("/home/user/f.txt") == "file:///home/user/f.txt"

    def test_relative_path(self) -> None:
        assert path_to_file_uri("a/b") == "file://a/b"

    def test_accepts_path_objects(self) -> None:
        assert path_to_file_uri(PurePosixPath("/tmp/x.bin")) == "file:///tmp/x.bin"
        assert path_to_file_uri(PureWindowsPath("c:/a/b.ext")) == "file:///c:/a/b.ext"

    @pytest.mark.parametrize(
        "path",
        ["c:/a/b.ext", "C:/Program Files/app/x.dll", "/home/user/f.txt", "/", "d:/"],
    )
    def test_round_trip(self, path: str) -> None:
        assert file_uri_to_path(path_to_file_uri(path)) == path

    def test_round_trip_backslash_path(self) -> None:
        assert file_uri_to_path(path_to_file_uri("c:\\a\\b.ext")) == "c:/a/b.ext"

    def test_unc_round_trip_with_unc_style(self) -> None:
        uri = path_to_file_uri("//fnord/a/b.ext")
        assert file_uri_to_path(uri, AuthorityStyle.UNC) == "//fnord/a/b.ext"

    def test_drive_like_posix_segment_reads_back_as_drive(self) -> None:
        """A leading /c: segment is indistinguishable from a drive in the URI."""
        uri = path_to_file_uri("/c:/x")
        assert uri == "file:///c:/x"
        assert file_uri_to_path(uri) == "c:/x"
