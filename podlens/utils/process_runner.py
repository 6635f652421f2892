"""External-process collaborator: foreground shells, captured commands, clipboard."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

from podlens.constants.timeouts import BACKGROUND_COMMAND_TIMEOUT, CLIPBOARD_TIMEOUT

logger = logging.getLogger(__name__)

_LINUX_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class ProcessRunner:
    """Runs shell commands on behalf of the dashboard."""

    def run_foreground(self, command: str) -> int:
        """Run ``command`` attached to the terminal and return its exit status.

        The caller must have released the terminal (``App.suspend()``) first.
        """
        logger.info("Running foreground command: %s", command)
        return subprocess.run(["sh", "-c", command], check=False).returncode

    def run_background(
        self, command: str, timeout: int = BACKGROUND_COMMAND_TIMEOUT
    ) -> str:
        """Run ``command`` and return its combined output.

        Raises:
            RuntimeError: the command exited non-zero.
        """
        logger.debug("Running background command: %s", command)
        result = subprocess.run(
            ["sh", "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
            check=False,
        )
        if result.returncode != 0:
            output = (result.stdout or "").strip()
            raise RuntimeError(output or f"command exited with status {result.returncode}")
        return result.stdout

    def copy_to_clipboard(self, text: str) -> None:
        """Copy text to system clipboard using platform-appropriate command."""
        cmd = self._clipboard_command()
        try:
            process = subprocess.Popen(cmd, stdin=subprocess.PIPE, text=True)
            process.communicate(input=text, timeout=CLIPBOARD_TIMEOUT)
        except FileNotFoundError:
            raise RuntimeError(f"Clipboard tool '{cmd[0]}' not found.") from None
        if process.returncode not in (0, None):
            raise RuntimeError(f"Clipboard tool '{cmd[0]}' failed")

    @staticmethod
    def _clipboard_command() -> list[str]:
        system = platform.system()
        if system == "Darwin":
            return ["pbcopy"]
        if system == "Windows" or "microsoft" in platform.release().lower():
            return ["clip.exe"]
        for candidate in _LINUX_CLIPBOARD_COMMANDS:
            if shutil.which(candidate[0]):
                return list(candidate)
        raise RuntimeError(
            "No clipboard tool found. Install xclip: sudo apt install xclip"
        )
