from __future__ import annotations

from typing import List, Optional, Sequence

from .namespace import NamespaceResolver
from .runner import CommandConfig, ExecutionResult, ProcessRunner


class CommandDispatcher:
    """Entry point every tool function uses to reach the outside world.

    Holds the per-process ``CommandConfig`` and the runner/resolver built from
    it. Tool functions validate their input, build an argument vector, resolve
    the namespace through ``namespace()`` and hand the vector to one of the
    ``kubectl`` / ``mtv`` / ``virtctl`` methods. Nothing here keeps state
    between calls.
    """

    def __init__(
        self,
        config: Optional[CommandConfig] = None,
        runner: Optional[ProcessRunner] = None,
        resolver: Optional[NamespaceResolver] = None,
    ) -> None:
        self.config = config or CommandConfig()
        self.runner = runner or ProcessRunner(timeout_seconds=self.config.timeout_seconds)
        self.resolver = resolver or NamespaceResolver(self.runner, kubectl_bin=self.config.kubectl_bin)

    def namespace(self, explicit: Optional[str] = None) -> str:
        return self.resolver.resolve(explicit)

    def scope_args(self, namespace: Optional[str] = None, all_namespaces: bool = False) -> List[str]:
        """``-A`` when listing across namespaces, otherwise ``-n <resolved>``."""
        if all_namespaces:
            return ["-A"]
        ns = self.namespace(namespace)
        return ["-n", ns] if ns else []

    def kubectl(self, args: Sequence[str]) -> ExecutionResult:
        return self.runner.run(self.config.kubectl_bin, list(args))

    def mtv(self, args: Sequence[str]) -> ExecutionResult:
        return self.runner.run(self.config.mtv_bin, list(args))

    def virtctl(self, args: Sequence[str]) -> str:
        """Run virtctl and return stdout verbatim (stderr is dropped on success)."""
        return self.runner.run(self.config.virtctl_bin, list(args)).stdout
