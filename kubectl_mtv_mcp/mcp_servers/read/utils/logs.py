from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import NUMBER, SWITCH, Flag, build_flags
from ...common.formatting import command_envelope

MTV_NAMESPACE = "openshift-mtv"
CONTROLLER_DEPLOYMENT = "forklift-controller"
CONTROLLER_CONTAINER = "main"
DEFAULT_TAIL_LINES = 100

_LOG_FLAGS = (
    Flag("container", "-c"),
    Flag("tail_lines", "--tail", NUMBER),
    Flag("since", "--since"),
    Flag("previous", "--previous", SWITCH),
    Flag("timestamps", "--timestamps", SWITCH),
)


def get_logs(
    d: CommandDispatcher,
    *,
    namespace: Optional[str] = None,
    pod_name: Optional[str] = None,
    deployment: Optional[str] = None,
    container: Optional[str] = None,
    tail_lines: int = DEFAULT_TAIL_LINES,
    since: Optional[str] = None,
    previous: bool = False,
    timestamps: bool = False,
) -> Dict[str, Any]:
    """Fetch container logs, by default from the forklift controller.

    The namespace defaults to the MTV operator namespace rather than the
    kubectl context, since that is where the controller runs.
    """
    if pod_name:
        target = pod_name
    else:
        target = f"deployment/{deployment or CONTROLLER_DEPLOYMENT}"
        if container is None:
            container = CONTROLLER_CONTAINER

    args = ["logs", target, "-n", namespace or MTV_NAMESPACE]
    args += build_flags(
        {
            "container": container,
            "tail_lines": tail_lines,
            "since": since,
            "previous": previous,
            "timestamps": timestamps,
        },
        _LOG_FLAGS,
    )
    return command_envelope(d.kubectl(args))
