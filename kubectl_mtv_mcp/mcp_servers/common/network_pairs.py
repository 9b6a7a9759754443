from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .errors import DuplicateNetworkTargetError

IGNORED_TARGET = "ignored"
DEFAULT_TARGET = "default"


@dataclass(frozen=True)
class NetworkPair:
    source: str
    target: str


def parse_network_pairs(pairs_text: str) -> List[NetworkPair]:
    """Parse ``"src1:tgt1,src2:tgt2"`` into pairs.

    Only the first colon separates source from target, so a target may itself
    contain colons. Empty segments and segments
    without a colon are skipped.
    """
    pairs: List[NetworkPair] = []
    for segment in (pairs_text or "").split(","):
        source, sep, target = segment.partition(":")
        if not sep:
            continue
        pairs.append(NetworkPair(source=source.strip(), target=target.strip()))
    return pairs


def validate_network_pairs(pairs_text: str) -> None:
    """Reject mappings that send two sources to the same exclusive target.

    ``ignored`` may be used by any number of sources. Every other target,
    including ``default`` (pod networking), may be claimed once.
    """
    if not (pairs_text or "").strip():
        return

    claimed: Dict[str, str] = {}
    for pair in parse_network_pairs(pairs_text):
        if pair.target == IGNORED_TARGET:
            continue
        if pair.target in claimed:
            raise DuplicateNetworkTargetError(pair.target, sources=[claimed[pair.target], pair.source])
        claimed[pair.target] = pair.source
