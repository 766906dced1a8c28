"""Path and content helpers shared by resolution and reconciliation.

Registry paths are always slash-separated strings, independent of the host OS.
"""

import re

_TS_EXTENSION = re.compile(r"\.tsx?$")


def find_common_root(paths: list[str], needle: str) -> str:
    """Find the deepest directory of ``needle`` shared with a sibling file.

    Multi-file components (a node, its view, its stylesheet) are anchored by
    the closest ancestor directory that at least one other sibling also lives
    under.

    Args:
        paths: All registry paths belonging to one component
        needle: The registry path to find the root for (member of ``paths``)

    Returns:
        Shared directory with a leading slash, the needle's parent directory
        if no sibling shares a prefix, or "" if the needle has no directory

    Examples:
        >>> find_common_root(["a/b/c.tsx", "a/b/d.ts"], "a/b/c.tsx")
        '/a/b'
        >>> find_common_root(["a/b/c.tsx", "a/e/f.ts"], "a/b/c.tsx")
        '/a'
        >>> find_common_root(["a/b/c.tsx"], "a/b/c.tsx")
        '/a/b'
    """
    normalized_paths = [p.removeprefix("/") for p in paths]
    normalized_needle = needle.removeprefix("/")

    needle_segments = normalized_needle.split("/")[:-1]
    if not needle_segments:
        return ""

    # Longest prefix first
    for i in range(len(needle_segments), 0, -1):
        prefix = "/".join(needle_segments[:i])
        if any(path != normalized_needle and path.startswith(prefix + "/") for path in normalized_paths):
            return "/" + prefix

    return "/" + "/".join(needle_segments)


def resolve_nested_file_path(file_path: str, target_dir: str) -> str:
    """Compute a registry file's path relative to its base directory.

    Finds the base directory's final segment among the file's own segments
    and keeps everything after it. Files that never mention that segment are
    flattened to their basename.

    Args:
        file_path: Registry path (e.g. "tiptap-ui/blockquote-button/blockquote-button.tsx")
        target_dir: Base directory (e.g. "/proj/src/components/tiptap-ui")

    Returns:
        Relative path under the base directory

    Example:
        >>> resolve_nested_file_path("tiptap-ui/button/button.tsx", "/proj/components/tiptap-ui")
        'button/button.tsx'
    """
    file_segments = file_path.strip("/").split("/")
    target_segments = target_dir.strip("/").split("/")

    last_target_segment = target_segments[-1]
    if last_target_segment not in file_segments:
        return file_segments[-1]

    common_dir_index = file_segments.index(last_target_segment)
    return "/".join(file_segments[common_dir_index + 1 :])


def get_normalized_file_content(content: str) -> str:
    """Normalize content for comparison: LF line endings, no surrounding whitespace."""
    return content.replace("\r\n", "\n").strip()


def downgrade_extension(file_path: str) -> str:
    """Rewrite a trailing .tsx/.ts extension to .jsx/.js for untyped projects."""
    return _TS_EXTENSION.sub(lambda m: ".jsx" if m.group(0) == ".tsx" else ".js", file_path)
