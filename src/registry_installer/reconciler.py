"""File reconciliation - Write registry files into a host project safely.

Per file, in input order: resolve path, transform content, compare with any
existing file, ask before overwriting, then write. Files are processed one at
a time so overwrite prompts appear in input order.

Mechanism only: apps inject config, project info, the confirmation
capability and transform stages.
"""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from .exceptions import FileWriteError
from .exceptions import InstallerError
from .exceptions import PromptCancelledError
from .exceptions import TransformError
from .protocols import ConfirmProtocol
from .protocols import TransformStage
from .resolver import FilePathResolver
from .schema import ProjectConfig
from .schema import ProjectInfo
from .schema import RegistryFile
from .transform import TransformContext
from .transform import run_transforms
from .utils import get_normalized_file_content

logger = logging.getLogger(__name__)


@dataclass
class FileFailure:
    """A file that could not be installed."""

    path: str
    error: InstallerError


@dataclass
class ReconciliationOutcome:
    """Manifest of one reconciliation run (project-relative paths, input order)."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """Check if any file was created or updated."""
        return bool(self.created or self.updated)


def _plural(count: int) -> str:
    return "file" if count == 1 else "files"


def format_outcome_summary(outcome: ReconciliationOutcome, silent: bool = False) -> list[str]:
    """
    Format the run manifest for display.

    Args:
        outcome: Reconciliation outcome
        silent: Only headers, no per-file lines

    Returns:
        Display lines, grouped under count headers

    Example:
        >>> format_outcome_summary(ReconciliationOutcome(created=["src/a.tsx"]))
        ['Created 1 file:', '  - src/a.tsx']
    """
    if not outcome.has_changes and not outcome.skipped:
        return ["No files updated."]

    lines: list[str] = []
    groups = [
        (outcome.created, "Created {count} {noun}:"),
        (outcome.updated, "Updated {count} {noun}:"),
        (outcome.skipped, "Skipped {count} {noun}: (use --overwrite to overwrite)"),
    ]
    for paths, header in groups:
        if not paths:
            continue
        lines.append(header.format(count=len(paths), noun=_plural(len(paths))))
        if not silent:
            lines.extend(f"  - {path}" for path in paths)
    return lines


async def _confirm_overwrite(file: RegistryFile, confirm: ConfirmProtocol | None) -> bool:
    file_name = file.path.rsplit("/", 1)[-1]

    if confirm is None:
        logger.warning(f"{file_name} already exists and no confirmation is available, keeping existing file")
        return False

    try:
        return await confirm(f"The file {file_name} already exists. Would you like to overwrite?")
    except PromptCancelledError:
        logger.debug(f"Overwrite prompt cancelled for {file_name}")
        return False


async def _transform_content(file: RegistryFile, config: ProjectConfig, stages: Sequence[TransformStage]) -> str:
    context = TransformContext(filename=file.path, config=config, transform_jsx=not config.tsx)
    try:
        return await run_transforms(file.content or "", context, stages)
    except Exception as e:
        raise TransformError(f"Failed to transform {file.path}: {e}", context={"source_path": file.path}) from e


def _read_existing(file_path: Path) -> str:
    try:
        # Undecodable bytes compare as different instead of failing the batch
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileWriteError(f"Failed to read {file_path}: {e}", context={"path": str(file_path)}) from e


def _write_file(file_path: Path, content: str) -> None:
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Failed to write {file_path}: {e}", context={"path": str(file_path)}) from e


async def update_files(
    files: Sequence[RegistryFile],
    config: ProjectConfig,
    project_info: ProjectInfo,
    *,
    confirm: ConfirmProtocol | None = None,
    transformers: Sequence[TransformStage] = (),
    overwrite: bool = False,
    force: bool = False,
    silent: bool = False,
) -> ReconciliationOutcome:
    """
    Install registry files into the host project (mechanism only).

    Apps provide:
    - config / project_info: Where files go (app policy)
    - confirm: How to ask before overwriting a changed file
    - transformers: How source is adapted to the host

    Process, per file:
    1. Skip metadata-only entries (no content)
    2. Resolve target path (no path: file is not applicable, not recorded)
    3. Transform content
    4. Unchanged existing file: skipped
    5. Changed existing file: ask unless overwrite; "no" is skipped
    6. Create parent directories and write: created or updated

    A failing file is recorded in ``failures`` and the batch continues.

    Args:
        files: Registry files of one component, in install order
        config: Host project config
        project_info: Detected project facts
        confirm: Overwrite confirmation capability
        transformers: Transform stages applied to each file's content
        overwrite: Overwrite changed files without asking
        force: Reserved passthrough from the CLI layer; has no effect here
        silent: Suppress per-file lines in the summary

    Returns:
        ReconciliationOutcome with created/updated/skipped paths

    Example:
        >>> outcome = await update_files(
        ...     files=item.files,
        ...     config=config,
        ...     project_info=ProjectInfo(is_src_dir=True, framework="next-app"),
        ...     confirm=prompt_yes_no,
        ... )
        >>> print(outcome.created)
    """
    outcome = ReconciliationOutcome()
    if not files:
        return outcome

    logger.debug(f"Updating {len(files)} files (overwrite={overwrite}, force={force})")
    resolver = FilePathResolver(config, project_info, [f.path for f in files])

    for file in files:
        if not file.content:
            continue

        file_path = resolver.resolve(file)
        if file_path is None:
            continue

        relative_path = os.path.relpath(file_path, config.cwd)

        try:
            content = await _transform_content(file, config, transformers)

            existing = file_path.exists()
            if existing:
                existing_content = _read_existing(file_path)
                if get_normalized_file_content(existing_content) == get_normalized_file_content(content):
                    outcome.skipped.append(relative_path)
                    continue

                if not overwrite and not await _confirm_overwrite(file, confirm):
                    outcome.skipped.append(relative_path)
                    continue

            _write_file(file_path, content)

        except InstallerError as e:
            logger.error(e.message)
            outcome.failures.append(FileFailure(path=relative_path, error=e))
            continue

        if existing:
            outcome.updated.append(relative_path)
        else:
            outcome.created.append(relative_path)

    for line in format_outcome_summary(outcome, silent=silent):
        logger.info(line)

    return outcome
