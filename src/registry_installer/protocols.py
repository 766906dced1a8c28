"""Protocols for capabilities the app injects into reconciliation.

The library never prompts or transforms source on its own: apps provide a
confirmation capability and transform stages.
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from .transform import TransformContext


class ConfirmProtocol(Protocol):
    """Protocol for yes/no overwrite confirmation.

    Example implementations:
    - Interactive terminal prompt
    - Always-yes / always-no stubs for scripted runs and tests
    """

    async def __call__(self, message: str) -> bool:
        """Ask whether an existing file should be overwritten.

        Args:
            message: Question to show the user

        Returns:
            True to overwrite, False to keep the existing file

        Raises:
            PromptCancelledError: If the prompt was cancelled (treated as "no")
        """
        ...


class TransformStage(Protocol):
    """Protocol for one stage of the source transform pipeline.

    Stages such as import-alias rewriting, directive injection or env-var
    substitution; each receives the previous stage's output.
    """

    async def __call__(self, context: "TransformContext", content: str) -> str:
        """Transform source content.

        Args:
            context: Source path, project config and JSX-downgrade flag
            content: Current source text

        Returns:
            Transformed source text
        """
        ...
