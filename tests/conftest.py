from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from kubectl_mtv_mcp.mcp_servers.common.dispatcher import CommandDispatcher
from kubectl_mtv_mcp.mcp_servers.common.runner import CommandConfig, ExecutionResult


class FakeRunner:
    """Records every command and replays queued stdout (or raises queued errors)."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self._queued: Dict[str, List[Any]] = {}
        self.default_stdout = ""

    def respond(self, binary: str, *outputs: Any) -> None:
        self._queued.setdefault(binary, []).extend(outputs)

    def run(self, binary: str, args, *, timeout: Optional[float] = None) -> ExecutionResult:
        cmd = [binary, *args]
        self.calls.append(cmd)
        queued = self._queued.get(binary)
        out = queued.pop(0) if queued else self.default_stdout
        if isinstance(out, Exception):
            raise out
        return ExecutionResult(command=cmd, stdout=out, stderr="", returncode=0)

    @property
    def last(self) -> List[str]:
        return self.calls[-1]


class StubResolver:
    def __init__(self, current: str = "ctx-ns") -> None:
        self.current_namespace = current
        self.calls: List[Optional[str]] = []

    def resolve(self, explicit: Optional[str] = None) -> str:
        self.calls.append(explicit)
        return explicit or self.current_namespace


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture
def dispatcher(runner: FakeRunner, resolver: StubResolver) -> CommandDispatcher:
    return CommandDispatcher(CommandConfig(), runner=runner, resolver=resolver)
