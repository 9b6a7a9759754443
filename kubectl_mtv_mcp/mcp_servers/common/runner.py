from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from kubectl_mtv_mcp.config_utils import env_int, env_optional_str

from .errors import CommandNotFoundError, CommandTimeoutError, ExecutionError, NonZeroExitError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120

_SECRET_FLAGS = ("--password", "--token")


def _subprocess_creationflags() -> int:
    """Avoid flashing a console window on Windows."""
    if os.name == "nt" and hasattr(subprocess, "CREATE_NO_WINDOW"):
        return int(subprocess.CREATE_NO_WINDOW)
    return 0


def _as_text(value: Union[str, bytes, None]) -> str:
    # TimeoutExpired carries raw bytes even when the process ran in text mode.
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def mask_secrets(command: Sequence[str]) -> List[str]:
    masked: List[str] = []
    hide_next = False
    for part in command:
        if hide_next:
            masked.append("****")
            hide_next = False
            continue
        flag, sep, _ = part.partition("=")
        if flag in _SECRET_FLAGS:
            if sep:
                masked.append(f"{flag}=****")
            else:
                masked.append(part)
                hide_next = True
            continue
        masked.append(part)
    return masked


@dataclass(frozen=True)
class CommandConfig:
    """Executable names and limits shared by every tool invocation.

    Built once at process start and passed down explicitly; nothing mutates it
    afterwards.

    Env vars:
    - VIRTCTL_COMMAND: executable used for virtctl calls (default: virtctl,
      e.g. ``kubectl-virt``)
    - MTV_MCP_COMMAND_TIMEOUT: wall-clock limit per command in seconds
      (default: 120)
    """

    kubectl_bin: str = "kubectl"
    mtv_bin: str = "kubectl-mtv"
    virtctl_bin: str = "virtctl"
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    DEFAULT_VIRTCTL_BIN = "virtctl"

    @classmethod
    def from_env(cls) -> "CommandConfig":
        return cls(
            virtctl_bin=env_optional_str("VIRTCTL_COMMAND", cls.DEFAULT_VIRTCTL_BIN),
            timeout_seconds=env_int("MTV_MCP_COMMAND_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, minimum=1),
        )


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of one finished command."""

    command: List[str]
    stdout: str
    stderr: str
    returncode: int

    @property
    def command_line(self) -> str:
        return shlex.join(mask_secrets(self.command))


class ProcessRunner:
    """Run external executables with a hard timeout and classified failures."""

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds

    def run(self, binary: str, args: Sequence[str], *, timeout: Optional[float] = None) -> ExecutionResult:
        cmd = [binary, *args]
        timeout_s = timeout if timeout is not None else self.timeout_seconds
        logger.debug("running %s", shlex.join(mask_secrets(cmd)))

        try:
            # subprocess.run kills the child before re-raising TimeoutExpired.
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout_s,
                stdin=subprocess.DEVNULL,
                creationflags=_subprocess_creationflags(),
            )
        except subprocess.TimeoutExpired as exc:
            logger.warning("%s timed out after %ss", binary, timeout_s)
            raise CommandTimeoutError(binary, cmd, timeout_s, stderr=_as_text(exc.stderr)) from exc
        except FileNotFoundError as exc:
            raise CommandNotFoundError(binary, cmd, str(exc)) from exc
        except OSError as exc:
            raise ExecutionError(binary, cmd, str(exc)) from exc

        stdout = proc.stdout or ""
        stderr = proc.stderr or ""
        if proc.returncode != 0:
            logger.warning("%s exited with status %d", binary, proc.returncode)
            raise NonZeroExitError(binary, cmd, proc.returncode, stderr=stderr)

        return ExecutionResult(command=cmd, stdout=stdout, stderr=stderr, returncode=proc.returncode)
