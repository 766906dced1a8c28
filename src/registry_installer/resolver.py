"""File path resolver - Registry file descriptors to project paths.

Resolution is a pure function of (file, config, context): no filesystem
checks, no dependence on other files' outcomes. The only cross-file input is
the static list of sibling registry paths used for common-root inference.

Precedence (first match wins):
1. Template file without target -> components/<templates>/<name>/<rest>
2. Template data file with a "/data/" target -> components/<templates>/<name>/data/<tail>
3. "~/" target -> project root, ignoring src-dir
4. Page target -> framework-specific route (unsupported framework: no path)
5. Other targets -> project root or src/, leading "src/" normalized away
6. No target -> kind base directory + nested tail
"""

import logging
import re
from pathlib import Path

from .routes import resolve_page_target
from .schema import FileKind
from .schema import PathContext
from .schema import ProjectConfig
from .schema import ProjectInfo
from .schema import RegistryFile
from .targets import resolve_file_target_directory
from .utils import downgrade_extension
from .utils import find_common_root
from .utils import resolve_nested_file_path

logger = logging.getLogger(__name__)

TEMPLATES_DIR = "tiptap-templates"

_TEMPLATE_FILE = re.compile(rf"{TEMPLATES_DIR}/([^/]+)/(.*)")
_TEMPLATE_NAME = re.compile(rf"{TEMPLATES_DIR}/([^/]+)/")


def _resolve_template_path(file: RegistryFile, config: ProjectConfig) -> Path | None:
    templates_root = config.resolved_paths.components / TEMPLATES_DIR

    if not file.target:
        if file.kind == FileKind.PAGE or f"{TEMPLATES_DIR}/" not in file.path:
            return None
        match = _TEMPLATE_FILE.search(file.path)
        if not match:
            return None
        template_name, relative_path = match.groups()
        # Template components sit directly in the template directory
        relative_path = relative_path.lstrip("/").removeprefix("components/").lstrip("/")
        return templates_root / template_name / relative_path

    if f"{TEMPLATES_DIR}/" in file.path and "/data/" in file.target:
        match = _TEMPLATE_NAME.search(file.path)
        if not match:
            return None
        data_path = file.target.split("/data/")[1].lstrip("/")
        return templates_root / match.group(1) / "data" / data_path

    return None


def _resolve_target_path(file: RegistryFile, target: str, config: ProjectConfig, context: PathContext) -> Path | None:
    if target.startswith("~/"):
        return config.cwd / target.removeprefix("~/").lstrip("/")

    # Absolute-looking targets stay inside the project
    target = target.lstrip("/")

    if file.kind == FileKind.PAGE:
        target = resolve_page_target(target, context.framework)
        if not target:
            logger.debug(f"No route convention for framework '{context.framework.value}', skipping {file.path}")
            return None

    target = target.removeprefix("src/")
    if context.is_src_dir:
        return config.cwd / "src" / target
    return config.cwd / target


def resolve_file_path(file: RegistryFile, config: ProjectConfig, context: PathContext) -> Path | None:
    """
    Resolve a registry file to its absolute path in the host project.

    Args:
        file: Registry file descriptor
        config: Host project config (resolved paths, tsx)
        context: Inferred per-file context (src-dir, framework, common root)

    Returns:
        Absolute target path, or None if the file has no place in this
        project (page file for an unsupported framework)

    Example:
        >>> file = RegistryFile(path="tiptap-ui/blockquote-button/blockquote-button.tsx", type="ui")
        >>> resolve_file_path(file, config, PathContext())
        PosixPath('/proj/src/components/tiptap-ui/blockquote-button/blockquote-button.tsx')
    """
    resolved = _resolve_template_path(file, config)

    if resolved is None and file.target:
        resolved = _resolve_target_path(file, file.target, config, context)
        if resolved is None:
            return None

    if resolved is None:
        target_dir = resolve_file_target_directory(file.kind, config)
        relative_path = resolve_nested_file_path(file.path, target_dir.as_posix())
        resolved = target_dir / relative_path

    if not config.tsx:
        resolved = Path(downgrade_extension(str(resolved)))

    return resolved


class FilePathResolver:
    """
    Resolve every file of one component against a fixed project.

    Binds config, project info and the component's sibling paths once, then
    builds the per-file PathContext (including the common root) on demand.
    """

    def __init__(
        self,
        config: ProjectConfig,
        project_info: ProjectInfo,
        sibling_paths: list[str],
    ):
        """Initialize resolver with app-provided config and project info.

        Args:
            config: Host project config
            project_info: Detected project facts (src-dir, framework)
            sibling_paths: Registry paths of every file in the batch

        Example:
            >>> resolver = FilePathResolver(config, info, [f.path for f in files])
            >>> resolver.resolve(files[0])
        """
        self.config = config
        self.project_info = project_info
        self.sibling_paths = list(sibling_paths)

    def context_for(self, file: RegistryFile) -> PathContext:
        """Build the resolution context for one file."""
        return PathContext(
            is_src_dir=self.project_info.is_src_dir,
            framework=self.project_info.framework,
            common_root=find_common_root(self.sibling_paths, file.path),
        )

    def resolve(self, file: RegistryFile) -> Path | None:
        """Resolve one file; None means the file must not be written."""
        context = self.context_for(file)
        resolved = resolve_file_path(file, self.config, context)
        logger.debug(f"Resolved {file.path} (root {context.common_root or '/'}) -> {resolved}")
        return resolved
