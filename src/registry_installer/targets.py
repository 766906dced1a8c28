"""Target directory mapping - File kind to host base directory.

The table below is the single source of truth for default placement.
Add a kind by adding a row.
"""

from pathlib import Path

from .schema import FileKind
from .schema import ProjectConfig

# Kind -> ResolvedPaths attribute
KIND_DIRECTORIES: dict[FileKind, str] = {
    FileKind.UI: "ui",
    FileKind.UI_PRIMITIVE: "ui_primitives",
    FileKind.EXTENSION: "extensions",
    FileKind.NODE: "nodes",
    FileKind.ICON: "icons",
    FileKind.HOOK: "hooks",
    FileKind.LIB: "lib",
    FileKind.CONTEXT: "contexts",
    FileKind.STYLE: "styles",
    FileKind.TEMPLATE: "components",
    FileKind.COMPONENT: "components",
}

DEFAULT_DIRECTORY = "components"


def resolve_file_target_directory(
    kind: FileKind | None,
    config: ProjectConfig,
    override: Path | None = None,
) -> Path:
    """
    Look up the base directory for a file kind.

    Args:
        kind: Registry file kind (None for unknown kinds)
        config: Host project config with resolved paths
        override: Explicit directory that wins over the table

    Returns:
        Absolute base directory

    Example:
        >>> resolve_file_target_directory(FileKind.HOOK, config)
        PosixPath('/proj/src/hooks')
    """
    if override is not None:
        return override

    attribute = KIND_DIRECTORIES.get(kind, DEFAULT_DIRECTORY) if kind else DEFAULT_DIRECTORY
    return getattr(config.resolved_paths, attribute)
