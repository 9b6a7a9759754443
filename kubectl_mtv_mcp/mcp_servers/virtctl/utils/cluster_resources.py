from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...common.dispatcher import CommandDispatcher
from ...common.errors import ExecutionError
from ...common.formatting import load_json_or_text
from ...common.validation import require_choice

logger = logging.getLogger(__name__)

RESOURCE_TYPES = ("instancetypes", "preferences", "datasources", "storageclasses", "all")
SCOPES = ("all", "cluster", "namespaced")

# (cluster-scoped kind, namespaced kind)
_SCOPED_KINDS = {
    "instancetypes": ("virtualmachineclusterinstancetype", "virtualmachineinstancetype"),
    "preferences": ("virtualmachineclusterpreference", "virtualmachinepreference"),
}


def build_get_args(
    kind: str,
    *,
    namespaced: bool,
    namespace: Optional[str] = None,
    all_namespaces: bool = True,
    label_selector: Optional[str] = None,
    show_labels: bool = False,
) -> List[str]:
    args = ["get", kind]
    if namespaced:
        if namespace:
            args += ["-n", namespace]
        elif all_namespaces:
            args.append("-A")
    if label_selector:
        args += ["-l", label_selector]
    if show_labels:
        args.append("--show-labels")
    args += ["-o", "json"]
    return args


def _query(d: CommandDispatcher, args: Sequence[str]) -> Any:
    return load_json_or_text(d.kubectl(args).stdout)


def _merge(d: CommandDispatcher, queries: Sequence[Tuple[str, List[str]]]) -> Dict[str, Any]:
    """Run each query; a failing query is left out of the result."""
    merged: Dict[str, Any] = {}
    for key, args in queries:
        try:
            merged[key] = _query(d, args)
        except ExecutionError as exc:
            logger.warning("skipping %s: %s", key, exc)
    return merged


def get_resource_type(
    d: CommandDispatcher,
    resource_type: str,
    *,
    scope: str = "all",
    namespace: Optional[str] = None,
    label_selector: Optional[str] = None,
    show_labels: bool = False,
) -> Any:
    common = {"label_selector": label_selector, "show_labels": show_labels}

    if resource_type in _SCOPED_KINDS:
        cluster_kind, namespaced_kind = _SCOPED_KINDS[resource_type]
        cluster_args = build_get_args(cluster_kind, namespaced=False, **common)
        namespaced_args = build_get_args(namespaced_kind, namespaced=True, namespace=namespace, **common)
        if scope == "cluster":
            return _query(d, cluster_args)
        if scope == "namespaced":
            return _query(d, namespaced_args)
        return _merge(d, [("cluster", cluster_args), ("namespaced", namespaced_args)])

    if resource_type == "storageclasses":
        return _query(d, build_get_args("storageclass", namespaced=False, **common))

    # datasources: cluster scope means "current namespace only" unless one is given.
    args = build_get_args(
        "datasource",
        namespaced=True,
        namespace=namespace,
        all_namespaces=scope != "cluster",
        **common,
    )
    return _query(d, args)


def cluster_resources(
    d: CommandDispatcher,
    resource_type: str,
    *,
    scope: Optional[str] = None,
    namespace: Optional[str] = None,
    label_selector: Optional[str] = None,
    show_labels: bool = False,
) -> Any:
    """Discover instance types, preferences, data sources and storage classes.

    The namespace is used as given and never resolved from the kubectl
    context: without one, namespaced kinds are listed across all namespaces.
    """
    resource_type = require_choice(resource_type, RESOURCE_TYPES, field="resource_type", noun="types")
    scope = require_choice(scope, SCOPES, field="scope", noun="scopes", default="all")
    kwargs = {"scope": scope, "namespace": namespace, "label_selector": label_selector, "show_labels": show_labels}

    if resource_type != "all":
        return get_resource_type(d, resource_type, **kwargs)

    results: Dict[str, Any] = {}
    for res_type in RESOURCE_TYPES:
        if res_type == "all":
            continue
        try:
            results[res_type] = get_resource_type(d, res_type, **kwargs)
        except ExecutionError as exc:
            logger.warning("skipping %s: %s", res_type, exc)
    return results
