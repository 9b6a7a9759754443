import pytest

from kubectl_mtv_mcp.mcp_servers.common.errors import InvalidChoiceError, MissingFieldError, ValidationError
from kubectl_mtv_mcp.mcp_servers.common.validation import require_choice, require_fields


def test_require_fields_names_first_missing():
    with pytest.raises(MissingFieldError, match="^vm_name is required$") as excinfo:
        require_fields(vm_name="  ", operation="")
    assert excinfo.value.field == "vm_name"
    assert isinstance(excinfo.value, ValidationError)


def test_require_fields_accepts_values():
    require_fields(vm_name="vm1", count=0, flag=False)


def test_missing_field_detail():
    assert str(MissingFieldError("volume_name", "for add operation")) == "volume_name is required for add operation"


def test_require_choice():
    assert require_choice("stop", ("start", "stop"), field="operation") == "stop"


def test_require_choice_lists_valid_set():
    with pytest.raises(InvalidChoiceError) as excinfo:
        require_choice("reboot", ("start", "stop"), field="operation", noun="operations")
    assert str(excinfo.value) == "invalid operation: reboot. Valid operations: start, stop"


def test_require_choice_default_only_when_empty():
    assert require_choice(None, ("all", "cluster"), field="scope", default="all") == "all"
    assert require_choice("", ("all", "cluster"), field="scope", default="all") == "all"
    with pytest.raises(InvalidChoiceError):
        require_choice("global", ("all", "cluster"), field="scope", default="all")


def test_require_choice_without_default_rejects_empty():
    with pytest.raises(InvalidChoiceError, match="invalid operation: . Valid"):
        require_choice(None, ("start",), field="operation")
