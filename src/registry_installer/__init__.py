"""registry-installer - Place registry component files into host projects.

Public API: path resolution (where each file belongs) and reconciliation
(whether writing it is safe).

This is library mechanism, apps inject policy (resolved paths, prompts, transforms).
"""

from .exceptions import FileWriteError
from .exceptions import InstallerError
from .exceptions import PromptCancelledError
from .exceptions import TransformError
from .protocols import ConfirmProtocol
from .protocols import TransformStage
from .reconciler import FileFailure
from .reconciler import ReconciliationOutcome
from .reconciler import format_outcome_summary
from .reconciler import update_files
from .resolver import FilePathResolver
from .resolver import resolve_file_path
from .routes import resolve_page_target
from .schema import FileKind
from .schema import Framework
from .schema import PathContext
from .schema import ProjectConfig
from .schema import ProjectInfo
from .schema import RegistryFile
from .schema import ResolvedPaths
from .targets import resolve_file_target_directory
from .transform import TransformContext
from .transform import run_transforms
from .utils import find_common_root
from .utils import get_normalized_file_content
from .utils import resolve_nested_file_path

__all__ = [
    # Models
    "FileKind",
    "Framework",
    "RegistryFile",
    "ResolvedPaths",
    "ProjectConfig",
    "ProjectInfo",
    "PathContext",
    # Resolution
    "FilePathResolver",
    "resolve_file_path",
    "resolve_file_target_directory",
    "resolve_page_target",
    # Reconciliation
    "update_files",
    "ReconciliationOutcome",
    "FileFailure",
    "format_outcome_summary",
    # Injected capabilities
    "ConfirmProtocol",
    "TransformStage",
    "TransformContext",
    "run_transforms",
    # Exceptions
    "InstallerError",
    "TransformError",
    "FileWriteError",
    "PromptCancelledError",
    # Utilities
    "find_common_root",
    "get_normalized_file_content",
    "resolve_nested_file_path",
]

__version__ = "0.1.0"
