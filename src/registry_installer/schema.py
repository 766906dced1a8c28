"""Registry and project models - Parse registry descriptors and host project settings.

All models are frozen: config and project info are built once by the app and
passed by reference into every call.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

logger = logging.getLogger(__name__)

REGISTRY_KIND_PREFIX = "registry:"


class FileKind(str, Enum):
    """Category of a registry file, governs its default placement."""

    UI = "ui"
    UI_PRIMITIVE = "ui-primitive"
    EXTENSION = "extension"
    NODE = "node"
    ICON = "icon"
    HOOK = "hook"
    LIB = "lib"
    CONTEXT = "context"
    STYLE = "style"
    TEMPLATE = "template"
    COMPONENT = "component"
    PAGE = "page"


class Framework(str, Enum):
    """Host framework variants that route rewriting knows about."""

    NEXT_APP = "next-app"
    NEXT_PAGES = "next-pages"
    REACT_ROUTER = "react-router"
    LARAVEL = "laravel"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "str | Framework | None") -> "Framework":
        """Map a detected framework name to a variant, UNKNOWN when unrecognized."""
        if isinstance(value, Framework):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class RegistryFile(BaseModel):
    """
    One file belonging to a registry component.

    Parses the registry descriptor ``{path, type, target?, content?}``.
    ``type`` may carry the ``registry:`` prefix used by published registries.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    kind: FileKind | None = Field(default=None, alias="type")
    target: str | None = None
    content: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        if value is None or isinstance(value, FileKind):
            return value
        name = str(value).removeprefix(REGISTRY_KIND_PREFIX)
        try:
            return FileKind(name)
        except ValueError:
            # Unknown kinds are placed like generic components
            logger.debug(f"Unrecognized registry file kind: {value}")
            return None


class ResolvedPaths(BaseModel):
    """Absolute base directory per file kind, resolved from the host's aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cwd: Path
    components: Path
    ui: Path = Field(alias="tiptapUi")
    ui_primitives: Path = Field(alias="tiptapUiPrimitives")
    extensions: Path = Field(alias="tiptapExtensions")
    nodes: Path = Field(alias="tiptapNodes")
    icons: Path = Field(alias="tiptapIcons")
    hooks: Path
    lib: Path
    contexts: Path
    styles: Path


class ProjectConfig(BaseModel):
    """
    Host project configuration consumed by path resolution.

    Apps build this from their own config layer; camelCase keys from a
    ``components.json``-style document are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resolved_paths: ResolvedPaths = Field(alias="resolvedPaths")
    tsx: bool = True

    @property
    def cwd(self) -> Path:
        """Project root."""
        return self.resolved_paths.cwd

    @classmethod
    def from_json_file(cls, config_path: Path) -> "ProjectConfig":
        """
        Load project config from a JSON document.

        Args:
            config_path: Path to JSON file with ``resolvedPaths`` and optional ``tsx``

        Returns:
            ProjectConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            json.JSONDecodeError: If invalid JSON
            pydantic.ValidationError: If required paths are missing
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Project config not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)


class ProjectInfo(BaseModel):
    """Detected facts about the host project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_src_dir: bool = Field(default=False, alias="isSrcDir")
    framework: Framework = Framework.UNKNOWN

    @field_validator("framework", mode="before")
    @classmethod
    def _parse_framework(cls, value: Any) -> Framework:
        # Project detection reports {"name": ...}
        if isinstance(value, dict):
            value = value.get("name")
        return Framework.parse(value)


class PathContext(BaseModel):
    """Per-file facts inferred before resolution."""

    model_config = ConfigDict(frozen=True)

    is_src_dir: bool = False
    framework: Framework = Framework.UNKNOWN
    common_root: str = ""
