"""Transform pipeline contract.

The pipeline is a left fold of stages over the raw registry content. Stage
internals belong to the app.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel
from pydantic import ConfigDict

from .protocols import TransformStage
from .schema import ProjectConfig

logger = logging.getLogger(__name__)


class TransformContext(BaseModel):
    """What every transform stage may know about the file being installed."""

    model_config = ConfigDict(frozen=True)

    filename: str
    config: ProjectConfig
    transform_jsx: bool = False


async def run_transforms(raw: str, context: TransformContext, stages: Sequence[TransformStage]) -> str:
    """
    Run transform stages in order over raw content.

    Args:
        raw: Registry file content
        context: Per-file transform context
        stages: Stages applied in sequence

    Returns:
        Final content to write

    Example:
        >>> content = await run_transforms(file.content, context, [rewrite_imports, inject_directives])
    """
    content = raw
    for stage in stages:
        content = await stage(context, content)
        logger.debug(f"Applied {getattr(stage, '__name__', type(stage).__name__)} to {context.filename}")
    return content
