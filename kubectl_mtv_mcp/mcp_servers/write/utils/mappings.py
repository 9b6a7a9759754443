from __future__ import annotations

from typing import Any, Dict, Optional

from ...common.dispatcher import CommandDispatcher
from ...common.flags import Flag, build_flags
from ...common.formatting import command_envelope
from ...common.network_pairs import validate_network_pairs
from ...common.validation import require_choice, require_fields

MAPPING_TYPES = ("network", "storage")
MAPPING_OPERATIONS = ("create", "delete", "patch")

_CREATE_FLAGS = (
    Flag("source_provider", "--source"),
    Flag("target_provider", "--target"),
    Flag("inventory_url", "-i"),
)

_PATCH_FLAGS = (
    Flag("add_pairs", "--add-pairs"),
    Flag("update_pairs", "--update-pairs"),
    Flag("remove_pairs", "--remove-pairs"),
    Flag("inventory_url", "-i"),
)


def manage_mapping(
    d: CommandDispatcher,
    mapping_type: str,
    operation: str,
    mapping_name: str,
    *,
    namespace: Optional[str] = None,
    source_provider: Optional[str] = None,
    target_provider: Optional[str] = None,
    pairs: Optional[str] = None,
    add_pairs: Optional[str] = None,
    update_pairs: Optional[str] = None,
    remove_pairs: Optional[str] = None,
    inventory_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Create, patch or delete a network or storage mapping.

    Pairs are ``source:target`` lists separated by commas. For network
    mappings every pair list that assigns targets is checked for duplicate
    targets before kubectl-mtv is run.
    """
    require_fields(mapping_type=mapping_type, operation=operation, mapping_name=mapping_name)
    mapping_type = require_choice(mapping_type, MAPPING_TYPES, field="mapping_type", noun="types")
    operation = require_choice(operation, MAPPING_OPERATIONS, field="operation", noun="operations")

    if mapping_type == "network":
        for text in (pairs, add_pairs, update_pairs):
            validate_network_pairs(text or "")

    args = [operation, "mapping", mapping_type, mapping_name]
    if operation == "create":
        require_fields(source_provider=source_provider, target_provider=target_provider)
        args += build_flags(
            {"source_provider": source_provider, "target_provider": target_provider, "inventory_url": inventory_url},
            _CREATE_FLAGS,
        )
        if pairs:
            args += [f"--{mapping_type}-pairs", pairs]
    elif operation == "patch":
        args += build_flags(
            {
                "add_pairs": add_pairs,
                "update_pairs": update_pairs,
                "remove_pairs": remove_pairs,
                "inventory_url": inventory_url,
            },
            _PATCH_FLAGS,
        )

    args += d.scope_args(namespace)
    return command_envelope(d.mtv(args))
