import pytest

from common.notice_engine.contracts import check_contract, enforce_contract
from common.notice_engine.errors import ContractViolationError
from common.notice_engine.models import DeliveryMethod
from common.notice_engine.runner import compute_notice


@pytest.mark.parametrize("method", list(DeliveryMethod))
def test_engine_output_satisfies_contract(make_facts, method):
    payload = compute_notice(make_facts(delivery_method=method)).to_wire()
    assert check_contract(payload) == []


def test_ineligible_output_satisfies_contract(make_facts):
    payload = compute_notice(make_facts(owner_is_natural_person=False, ownership_percent=10)).to_wire()
    assert check_contract(payload) == []
    assert enforce_contract(payload) is payload


def test_fallback_delivery_method_breaks_contract(make_facts):
    facts = make_facts().model_copy(update={"delivery_method": "CARRIER_PIGEON"})
    payload = compute_notice(facts).to_wire()
    issues = check_contract(payload)
    assert [i["path"] for i in issues] == ["result.deliveryMethod"]


def test_unknown_keys_rejected(make_facts):
    payload = compute_notice(make_facts()).to_wire()
    payload["result"]["debug"] = True
    issues = check_contract(payload)
    assert any(i["path"] == "result.debug" for i in issues)


def test_bad_date_format_rejected(make_facts):
    payload = compute_notice(make_facts()).to_wire()
    payload["result"]["earliestTerminationDate"] = "05/10/2026"
    issues = check_contract(payload)
    assert [i["path"] for i in issues] == ["result.earliestTerminationDate"]


def test_failure_envelope_is_not_a_success_payload():
    assert check_contract({"ok": False, "error": "nope"}) != []


def test_enforce_contract_raises_with_issues(make_facts):
    payload = compute_notice(make_facts()).to_wire()
    del payload["result"]["citations"]
    with pytest.raises(ContractViolationError) as excinfo:
        enforce_contract(payload)
    assert excinfo.value.issues[0]["path"] == "result.citations"
