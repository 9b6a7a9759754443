import json

import pytest

from kubectl_mtv_mcp.mcp_servers.common.errors import DuplicateNetworkTargetError, ValidationError
from kubectl_mtv_mcp.mcp_servers.common.network_pairs import (
    NetworkPair,
    parse_network_pairs,
    validate_network_pairs,
)


@pytest.mark.parametrize(
    "pairs",
    [
        "",
        "   ",
        "source1:target1",
        "source1:target1,source2:target2,source3:target3",
        "source1:default,source2:ignored,source3:nad1",
        "source1:ignored,source2:ignored,source3:ignored,source4:nad1",
        " source1:target1 , source2:target2 ",
        "source1 : target1 , source2 : target2",
    ],
)
def test_valid_pairs(pairs):
    assert validate_network_pairs(pairs) is None


@pytest.mark.parametrize(
    "pairs,target",
    [
        ("source1:default,source2:default", "default"),
        ("source1:nad1,source2:nad1", "nad1"),
        ("source1:ns1/nad1,source2:ns1/nad1", "ns1/nad1"),
        ("source1:target1,source2:target1,source3:target1", "target1"),
        ("source1:nad1,source2:nad2,source3:nad1", "nad1"),
        ("source1:default , source2:default", "default"),
    ],
)
def test_duplicate_target_rejected(pairs, target):
    with pytest.raises(DuplicateNetworkTargetError) as excinfo:
        validate_network_pairs(pairs)

    err = excinfo.value
    assert isinstance(err, ValidationError)
    assert err.target == target
    assert target in str(err)

    payload = json.loads(str(err))
    assert payload["error"] == "validation_error"
    assert payload["type"] == "duplicate_network_target"
    assert payload["target"] == target
    assert payload["message"]


def test_duplicate_reports_both_sources():
    with pytest.raises(DuplicateNetworkTargetError) as excinfo:
        validate_network_pairs("a:nad1,b:nad2,c:nad1")
    assert excinfo.value.sources == ["a", "c"]


def test_default_target_message_mentions_pod_network():
    err = DuplicateNetworkTargetError("default")
    assert "pod" in err.payload["message"]


def test_target_names_are_case_sensitive():
    validate_network_pairs("a:NAD1,b:nad1")


def test_validation_is_repeatable():
    for _ in range(2):
        assert validate_network_pairs("a:nad1,b:nad2") is None

    messages = []
    for _ in range(2):
        with pytest.raises(DuplicateNetworkTargetError) as excinfo:
            validate_network_pairs("a:nad1,b:nad1")
        messages.append(str(excinfo.value))
    assert messages[0] == messages[1]
    assert json.loads(messages[0])["target"] == "nad1"


def test_parse_splits_on_first_colon_and_skips_malformed():
    pairs = parse_network_pairs("VM Network : ns1/nad1,,no-colon, b:x:y")
    assert pairs == [NetworkPair("VM Network", "ns1/nad1"), NetworkPair("b", "x:y")]
