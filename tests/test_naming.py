"""Tests for dpp_http.naming module."""

import pytest

from dpp_http.archive import matching_extension
from dpp_http.naming import directory_name
from dpp_http.url import normalize


def name_for(raw: str) -> str:
    url = normalize(raw)
    assert url is not None, raw
    return directory_name(url)


class TestForgeArchives:
    """Forge URLs collapse to host/owner/repo."""

    def test_github_archive(self):
        """GitHub archives name the repository."""
        url = "https://github.com/Shougo/dpp-protocol-git/archive/refs/heads/main.zip"
        assert name_for(url) == "github.com/Shougo/dpp-protocol-git"

    def test_bitbucket_get(self):
        """Bitbucket get downloads name the repository."""
        url = "https://bitbucket.org/spilt/vim-peg/get/c6be9c909538.zip"
        assert name_for(url) == "bitbucket.org/spilt/vim-peg"

    def test_gitlab_archive(self):
        """GitLab archives skip the - separator."""
        url = "https://gitlab.com/foo/bar/-/archive/main/bar-main.zip"
        assert name_for(url) == "gitlab.com/foo/bar"

    def test_gitlab_subgroup(self):
        """GitLab subgroups stay part of the owner."""
        url = "https://gitlab.com/group/sub/bar/-/archive/v1/bar-v1.tar.gz"
        assert name_for(url) == "gitlab.com/group/sub/bar"

    def test_github_release_asset(self):
        """Release assets name the repository."""
        url = "https://github.com/owner/tool/releases/download/v1.2.3/tool-linux.tar.gz"
        assert name_for(url) == "github.com/owner/tool"

    def test_github_raw_path(self):
        """github.com is a forge, so raw paths share the repository name."""
        url = "https://github.com/owner/repo/raw/branch/path/to/file.txt"
        assert name_for(url) == "github.com/owner/repo"

    def test_git_suffix_stripped(self):
        """A .git suffix is dropped from the repository."""
        url = "https://github.com/owner/repo.git/archive/main.zip"
        assert name_for(url) == "github.com/owner/repo"

    def test_self_hosted_git_host(self):
        """Any host containing "git" is treated as a forge."""
        url = "https://git.example.org/team/plugin/archive/main.tar.gz"
        assert name_for(url) == "git.example.org/team/plugin"

    def test_archive_marker_on_any_host(self):
        """The archive segment names a repository on any host."""
        url = "https://code.example.com/team/plugin/archive/main.zip"
        assert name_for(url) == "code.example.com/team/plugin"

    def test_host_is_lowercased(self):
        """Hosts are lowercased, owner and repo are kept."""
        url = "https://GitHub.com/Owner/Repo/archive/main.zip"
        assert name_for(url) == "github.com/Owner/Repo"

    def test_marker_after_nested_path(self):
        """The two segments before the marker name the repository."""
        url = "https://code.example.com/mirror/team/plugin/archive/main.zip"
        assert name_for(url) == "code.example.com/team/plugin"


class TestMarkerPosition:
    """A marker too close to the root does not name a repository."""

    def test_marker_at_root(self):
        """A marker at the root falls back to the file stem."""
        assert name_for("https://example.com/archive/plugin.zip") == "plugin"

    def test_marker_after_one_segment(self):
        """One segment before the marker is not an owner and repo."""
        url = "https://downloads.example.com/pub/archive/plugin-1.0.tar.gz"
        assert name_for(url) == "plugin-1.0"

    def test_marker_at_root_on_forge(self):
        """Forge hosts follow the same marker position rule."""
        assert name_for("https://github.com/archive/plugin.tar.gz") == "plugin"

    def test_get_only_marks_bitbucket(self):
        """The get segment is an ordinary directory off bitbucket.org."""
        assert name_for("https://example.com/a/b/get/tool-1.0.zip") == "tool-1.0"

    def test_marker_after_github_raw(self):
        """A raw file under an "archive" directory keeps the repository name."""
        url = "https://github.com/o/r/raw/main/archive/foo.vim"
        assert name_for(url) == "github.com/o/r"

    def test_forge_file_at_second_segment(self):
        """A forge URL whose second segment is the archive uses the file stem."""
        assert name_for("https://github.com/owner/plugin.zip") == "plugin"


class TestFileNames:
    """Non-forge URLs use the file name."""

    def test_raw_githubusercontent(self):
        """Raw content uses the file name without extension."""
        url = "https://raw.githubusercontent.com/Shougo/x/master/vim/colors/candy.vim"
        assert name_for(url) == "candy"

    def test_raw_githubusercontent_keeps_hex_suffix(self):
        """Raw content only drops the extension."""
        url = "https://raw.githubusercontent.com/o/r/main/theme-abcdef1.vim"
        assert name_for(url) == "theme-abcdef1"

    def test_hex_suffix_stripped(self):
        """Commit hashes are dropped from file names."""
        url = "https://example.com/downloads/mylib-abcdef1234567.zip"
        assert name_for(url) == "mylib"

    def test_compound_extension(self):
        """Compound extensions are dropped as one unit."""
        url = "https://example.com/dist/plugin-1.0.tar.gz"
        assert name_for(url) == "plugin-1.0"

    def test_single_segment(self):
        """A lone file segment names the directory."""
        assert name_for("https://example.com/plugin.zip") == "plugin"

    def test_empty_stem_falls_back_to_host(self):
        """An empty stem falls back to the host."""
        assert name_for("https://example.com/.zip") == "example.com"

    def test_hostname_fallback(self):
        """A URL without a path uses the host."""
        assert directory_name("https://Example.com/") == "example.com"


class TestNonURLFallback:
    """Strings that are not URLs use the last path token."""

    def test_relative_path(self):
        """The last path token loses its extension."""
        assert directory_name("some/path/to/file.ext") == "file"

    def test_query_and_fragment_dropped(self):
        """Query and fragment are not part of the name."""
        assert directory_name("dir/mylib-abcdef1234567.zip?x=1#y") == "mylib"

    def test_compound_extension(self):
        """Compound extensions are dropped from paths too."""
        assert directory_name("dir/plugin.tar.gz") == "plugin"

    def test_only_slashes(self):
        """A string with no tokens is returned unchanged."""
        assert directory_name("///") == "///"


class TestDeterminism:
    """The same URL always yields the same name."""

    @pytest.mark.parametrize(
        "raw",
        [
            "https://github.com/o/r/archive/main.zip",
            "https://example.com/downloads/mylib-abcdef1234567.zip",
            "https://raw.githubusercontent.com/o/r/main/a.vim",
        ],
    )
    def test_repeatable(self, raw):
        """Naming twice gives the same result."""
        assert name_for(raw) == name_for(raw)

    def test_credentials_do_not_change_name(self):
        """User info is not part of the name."""
        assert name_for("https://u:p@github.com/o/r/archive/main.zip") == name_for(
            "https://github.com/o/r/archive/main.zip"
        )

    def test_string_and_canonical_agree(self):
        """Strings and canonical URLs are named alike."""
        raw = "https://gitlab.com/foo/bar/-/archive/main/bar-main.zip"
        assert directory_name(raw) == name_for(raw)

    def test_never_contains_dot_dot(self):
        """Dot segments are resolved before naming."""
        name = name_for("https://github.com/o/../../x/r/archive/main.zip")
        assert ".." not in name.split("/")


class TestLocalNameShape:
    """Every accepted URL yields a relative, extension-free name."""

    @pytest.mark.parametrize(
        "raw",
        [
            "https://raw.githubusercontent.com/Shougo/x/master/vim/colors/candy.vim",
            "https://example.com/downloads/plugin.zip",
            "https://example.com/plugin.tar.gz",
            "https://example.com/plugin.TGZ",
            "http://example.com/file.bz2",
            "https://github.com/owner/repo/releases/download/v1.0/asset",
            "https://github.com/owner/repo/archive/refs/heads/main.zip",
            "https://github.com/owner/repo/archive/main",
            "https://gitlab.com/foo/bar/-/archive/main/bar-main.zip",
            "https://bitbucket.org/spilt/vim-peg/get/c6be9c909538",
            "https://github.com/owner/repo/raw/main/plugin/foo.vim",
            "https://example.com/archive/plugin.zip",
            "https://downloads.example.com/pub/archive/plugin-1.0.tar.gz",
            "https://github.com/o/r/raw/main/archive/foo.vim",
            "https://github.com/owner/plugin.zip",
            "https://example.com/a/../../b/plugin.zip",
        ],
    )
    def test_no_extension_or_dot_segments(self, raw):
        """The last component carries no archive extension and no dot segments."""
        name = name_for(raw)
        assert name
        assert not name.startswith("/")
        assert matching_extension(name.rsplit("/", 1)[-1]) is None
        assert "." not in name.split("/") and ".." not in name.split("/")
