"""Tests for path and content helpers."""

from registry_installer.utils import downgrade_extension
from registry_installer.utils import find_common_root
from registry_installer.utils import get_normalized_file_content
from registry_installer.utils import resolve_nested_file_path


def test_common_root_shared_directory():
    """Files sharing a directory resolve to that directory."""
    paths = [
        "tiptap-node/mermaid-node/mermaid-node.tsx",
        "tiptap-node/mermaid-node/mermaid-extension.ts",
        "tiptap-node/mermaid-node/mermaid-node.scss",
    ]

    for needle in paths:
        assert find_common_root(paths, needle) == "/tiptap-node/mermaid-node"


def test_common_root_singleton():
    """A lone file resolves to its immediate parent."""
    assert find_common_root(["tiptap-ui/button/button.tsx"], "tiptap-ui/button/button.tsx") == "/tiptap-ui/button"


def test_common_root_shrinks_to_shared_ancestor():
    """Siblings in different subdirectories share their closest ancestor."""
    paths = [
        "tiptap-templates/simple/components/editor.tsx",
        "tiptap-templates/simple/data/content.json",
    ]

    assert find_common_root(paths, paths[0]) == "/tiptap-templates/simple"


def test_common_root_no_shared_prefix():
    """Unrelated siblings fall back to the needle's parent directory."""
    paths = ["tiptap-ui/button/button.tsx", "lib/utils.ts"]

    assert find_common_root(paths, "tiptap-ui/button/button.tsx") == "/tiptap-ui/button"


def test_common_root_top_level_file():
    """A file with no directory has no root."""
    assert find_common_root(["utils.ts", "lib/a.ts"], "utils.ts") == ""


def test_common_root_leading_slash():
    """Leading slashes are ignored."""
    paths = ["/a/b/c.ts", "a/b/d.ts"]
    assert find_common_root(paths, "/a/b/c.ts") == "/a/b"


def test_common_root_ignores_needle_itself():
    """Duplicates of the needle do not count as siblings."""
    paths = ["a/b/c.ts", "a/b/c.ts", "a/x.ts"]
    assert find_common_root(paths, "a/b/c.ts") == "/a"


def test_nested_path_after_matching_segment():
    """Tail after the base directory's last segment is kept."""
    result = resolve_nested_file_path(
        "tiptap-ui/blockquote-button/blockquote-button.tsx",
        "/proj/src/components/tiptap-ui",
    )
    assert result == "blockquote-button/blockquote-button.tsx"


def test_nested_path_without_match_flattens():
    """Paths that never mention the base segment flatten to the basename."""
    assert resolve_nested_file_path("registry/hooks/use-thing.ts", "/proj/src/hook") == "use-thing.ts"


def test_nested_path_trailing_slashes():
    """Leading and trailing slashes are ignored."""
    assert resolve_nested_file_path("/lib/tiptap-utils.ts", "/proj/src/lib/") == "tiptap-utils.ts"


def test_normalized_content_line_endings_and_whitespace():
    """CRLF and surrounding whitespace do not matter."""
    assert get_normalized_file_content("a\r\nb\r\n") == get_normalized_file_content("a\nb")
    assert get_normalized_file_content("  \nexport {}\n\n") == "export {}"


def test_normalized_content_keeps_inner_differences():
    """Inner whitespace still counts."""
    assert get_normalized_file_content("a\n\nb") != get_normalized_file_content("a\nb")


def test_downgrade_extension():
    """TypeScript extensions become JavaScript ones."""
    assert downgrade_extension("/p/button.tsx") == "/p/button.jsx"
    assert downgrade_extension("/p/utils.ts") == "/p/utils.js"
    assert downgrade_extension("/p/styles.scss") == "/p/styles.scss"
    assert downgrade_extension("/p/types.d.ts") == "/p/types.d.js"
    assert downgrade_extension("/p/tsx/file.json") == "/p/tsx/file.json"
