from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ...common.dispatcher import CommandDispatcher
from ...common.flags import Flag, build_flags
from ...common.formatting import command_envelope
from ...common.validation import require_choice, require_fields

SERVICE_OPERATIONS = ("expose", "unexpose")
EXPOSE_RESOURCE_TYPES = ("vm", "vmi", "vmirs")

EXPOSE_FLAGS = (
    Flag("name", "--name"),
    Flag("port", "--port"),
    Flag("target_port", "--target-port"),
    Flag("protocol", "--protocol"),
    Flag("type", "--type"),
)

# Alternative spellings accepted in expose_config.
_EXPOSE_ALIASES = {"service_name": "name", "service_type": "type"}


def expose_values(expose_config: Optional[Mapping[str, Any]], service_name: Optional[str] = None) -> Dict[str, Any]:
    """Fold ``service_name``/``service_type`` into ``name``/``type``.

    The canonical key wins over its alias; the top-level ``service_name`` is
    the last resort for the Service name.
    """
    values: Dict[str, Any] = dict(expose_config or {})
    for alias, key in _EXPOSE_ALIASES.items():
        if alias in values:
            aliased = values.pop(alias)
            if not values.get(key):
                values[key] = aliased
    if not values.get("name") and service_name:
        values["name"] = service_name
    return values


def build_expose_args(
    resource_type: str,
    resource_name: str,
    namespace: str,
    expose_config: Optional[Mapping[str, Any]] = None,
    service_name: Optional[str] = None,
) -> List[str]:
    args = ["expose", resource_type, resource_name]
    if namespace:
        args += ["-n", namespace]
    return args + build_flags(expose_values(expose_config, service_name), EXPOSE_FLAGS)


def service_management(
    d: CommandDispatcher,
    operation: str,
    *,
    resource_name: Optional[str] = None,
    resource_type: Optional[str] = None,
    namespace: Optional[str] = None,
    expose_config: Optional[Mapping[str, Any]] = None,
    service_name: Optional[str] = None,
) -> Union[str, Dict[str, Any]]:
    """Expose a VM as a Service (virtctl) or delete that Service (kubectl)."""
    operation = require_choice(operation, SERVICE_OPERATIONS, field="operation", noun="operations")

    if operation == "expose":
        resource_type = require_choice(resource_type, EXPOSE_RESOURCE_TYPES, field="resource_type", noun="types", default="vm")
        require_fields(resource_name=resource_name)
        return d.virtctl(
            build_expose_args(resource_type, resource_name, d.namespace(namespace), expose_config, service_name)
        )

    require_fields(service_name=service_name)
    args = ["delete", "service", service_name]
    ns = d.namespace(namespace)
    if ns:
        args += ["-n", ns]
    return command_envelope(d.kubectl(args))
