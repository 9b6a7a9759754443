from __future__ import annotations

import logging
from typing import Optional

from .errors import ExecutionError
from .runner import ProcessRunner

logger = logging.getLogger(__name__)

FALLBACK_NAMESPACE = "default"

_CURRENT_NAMESPACE_QUERY = ["config", "view", "--minify", "--output", "jsonpath={..namespace}"]


class NamespaceResolver:
    """Pick the namespace a tool call operates in.

    An explicit namespace always wins. Otherwise the active kubectl context is
    asked on every call (the context can change between calls), falling back
    to ``default`` when kubectl is missing, fails, or reports nothing.
    """

    def __init__(self, runner: ProcessRunner, kubectl_bin: str = "kubectl") -> None:
        self.runner = runner
        self.kubectl_bin = kubectl_bin

    def current(self) -> str:
        try:
            result = self.runner.run(self.kubectl_bin, _CURRENT_NAMESPACE_QUERY)
        except ExecutionError as exc:
            logger.debug("namespace lookup failed, using %s: %s", FALLBACK_NAMESPACE, exc)
            return FALLBACK_NAMESPACE
        namespace = result.stdout.strip()
        return namespace or FALLBACK_NAMESPACE

    def resolve(self, explicit: Optional[str] = None) -> str:
        if explicit:
            return explicit
        return self.current()
