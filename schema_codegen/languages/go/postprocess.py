"""Optional gofmt-style post-processing of written Go files."""

import shlex
import subprocess
from pathlib import Path
from types import TracebackType
from typing import List, Optional, Type, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

SUPPORTED_FILE_KINDS = frozenset({"supporting-file", "model-test", "model", "api-test", "api"})


class PostProcessError(Exception):
    """Raised when the configured formatter fails."""


class GoFormatter:
    """Run the configured formatter over generated files.

    The command is resolved once from configuration. Without a command
    every call is a no-op.

        with GoFormatter("gofmt -w") as formatter:
            formatter.process(path, "model")
    """

    def __init__(self, command: Optional[str], *, timeout: int = 120) -> None:
        self.command = shlex.split(command) if command else []
        self.timeout = timeout
        self.processed: List[Path] = []
        self._active = False

    @property
    def enabled(self) -> bool:
        return bool(self.command)

    def __enter__(self) -> "GoFormatter":
        if not self.enabled:
            logger.info("No post-process command configured, Go files will not be formatted")
        self._active = True
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._active = False
        if self.processed:
            logger.info("Formatted %d Go file(s)", len(self.processed))

    def process(self, path: Union[str, Path], file_kind: str) -> bool:
        """Format one file.

        Args:
            path: File that was written.
            file_kind: Kind of generated file (model, api, ...).

        Returns:
            True if the formatter ran on the file.

        Raises:
            PostProcessError: If used outside ``with`` or the command fails.
        """
        if not self._active:
            raise PostProcessError("GoFormatter must be used as a context manager")

        path = Path(path)
        if not self.enabled or file_kind not in SUPPORTED_FILE_KINDS or path.suffix != ".go":
            return False

        cmd = [*self.command, str(path)]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise PostProcessError(f"Formatting {path} failed: {e}") from e

        if result.returncode != 0:
            raise PostProcessError(
                f"Formatting {path} (exit {result.returncode}): {result.stderr.strip()}"
            )

        self.processed.append(path)
        return True
