from __future__ import annotations

import json
import logging

from formkit.models.rules import FormControl, Rules
from formkit.services.rule_export import export_rules, export_rules_json, is_static_callable, operator_name


def is_even(value, arg=None):
    return int(value) % 2 == 0


class Checks:
    @staticmethod
    def is_odd(value, arg=None):
        return int(value) % 2 == 1

    @classmethod
    def is_positive(cls, value, arg=None):
        return int(value) > 0

    def is_small(self, value, arg=None):
        return int(value) < 10


class CallableCheck:
    def __call__(self, value, arg=None):
        return True


def test_empty_rules_export_empty_list(email):
    assert export_rules(Rules(control=email)) == []
    assert export_rules(Rules(control=email, optional=True)) == []


def test_leaf_rules(email):
    rules = Rules(control=email)
    rules.add_rule(":filled", "Enter %label.")
    rules.add_rule(":minLength", None, 5)
    assert export_rules(rules) == [
        {"op": ":filled", "msg": "Enter E-mail."},
        {"op": ":minLength", "msg": "Please enter at least 5 characters.", "arg": 5},
    ]


def test_negated_rule(email):
    rules = Rules(control=email).add_rule(":equal", "Must differ from %s", "x", negative=True)
    assert export_rules(rules) == [{"op": "~:equal", "msg": "Must differ from x", "arg": "x"}]


def test_control_argument_becomes_reference(password):
    confirm = FormControl("password2", label="Confirm")
    rules = Rules(control=confirm).add_rule(":equal", "Passwords must match.", password)
    assert export_rules(rules) == [
        {"op": ":equal", "msg": "Passwords must match.", "arg": {"control": "password"}},
    ]


def test_list_argument_exported_elementwise(email, password):
    rules = Rules(control=email).add_rule(":range", None, [1, password])
    assert export_rules(rules) == [
        {
            "op": ":range",
            "msg": "Please enter a value between 1 and Password.",
            "arg": [1, {"control": "password"}],
        },
    ]


def test_message_keeps_value_placeholder(email):
    rules = Rules(control=email).add_rule(":email", "%value is not valid")
    assert export_rules(rules)[0]["msg"] == "%value is not valid"


def test_branch_rule(email):
    newsletter = FormControl("newsletter", label="Newsletter")
    rules = Rules(control=email)
    rules.add_condition_on(newsletter, ":equal", True).add_rule(":filled", "Required for newsletter")
    assert export_rules(rules) == [
        {
            "op": ":equal",
            "rules": [{"op": ":filled", "msg": "Required for newsletter"}],
            "control": "newsletter",
            "arg": True,
        },
    ]


def test_branch_control_uses_html_name(email):
    street = FormControl("address-street")
    rules = Rules(control=email)
    rules.add_condition_on(street, ":filled").add_rule(":filled")
    assert export_rules(rules)[0]["control"] == "address[street]"


def test_empty_branch_with_toggle_is_kept(email):
    newsletter = FormControl("newsletter")
    rules = Rules(control=email)
    rules.add_condition_on(newsletter, ":filled").toggle("news-box")
    rules.add_condition_on(newsletter, ":blank").toggle("hint", hide=False)
    assert export_rules(rules) == [
        {"op": ":filled", "rules": [], "control": "newsletter", "toggle": {"news-box": True}},
        {"op": ":blank", "rules": [], "control": "newsletter", "toggle": {"hint": False}},
    ]


def test_empty_branch_without_toggle_is_dropped(email):
    rules = Rules(control=email)
    rules.add_condition(":filled")
    assert export_rules(rules) == []


def test_branch_with_only_unexportable_rules_is_dropped(email):
    rules = Rules(control=email)
    rules.add_condition(":filled").add_rule(lambda value, arg: True, "Never exported")
    assert export_rules(rules) == []


def test_optional_marker_prepended_once(email):
    rules = Rules(control=email, optional=True)
    rules.add_rule(":email")
    rules.add_rule(":maxLength", None, 50)
    payload = export_rules(rules)
    assert payload[0] == {"op": "optional"}
    assert [item["op"] for item in payload].count("optional") == 1
    assert payload[1] == {"op": ":email", "msg": "Please enter a valid email address."}


def test_optional_without_exportable_rules_is_empty(email):
    rules = Rules(control=email, optional=True).add_rule(lambda value, arg: True)
    assert export_rules(rules) == []


def test_static_callables_are_exported_by_name(email):
    rules = Rules(control=email)
    rules.add_rule(is_even, "Must be even")
    rules.add_rule(Checks.is_odd, "Must be odd")
    rules.add_rule(Checks.is_positive, "Must be positive")
    ops = [item["op"] for item in export_rules(rules)]
    assert ops == [
        f"{is_even.__module__}.is_even",
        f"{Checks.__module__}.Checks.is_odd",
        f"{Checks.__module__}.Checks.is_positive",
    ]


def test_non_static_callables_are_skipped(email, caplog):
    def local_check(value, arg=None):
        return True

    rules = Rules(control=email)
    rules.add_rule(lambda value, arg: True, "lambda")
    rules.add_rule(local_check, "closure")
    rules.add_rule(Checks().is_small, "bound")
    rules.add_rule(CallableCheck(), "instance")
    rules.add_rule(":filled")
    with caplog.at_level(logging.DEBUG, logger="formkit.services.rule_export"):
        payload = export_rules(rules)
    assert payload == [{"op": ":filled", "msg": "This field is required."}]
    assert caplog.text.count("[rules] skipping") == 4


def test_is_static_callable():
    assert is_static_callable(is_even)
    assert is_static_callable(Checks.is_positive)
    assert is_static_callable(len)
    assert not is_static_callable(lambda: None)
    assert not is_static_callable(Checks().is_small)
    assert operator_name(":filled") == ":filled"
    assert operator_name(CallableCheck()) is None


def test_default_message_for_callable_without_message(email):
    rules = Rules(control=email).add_rule(is_even)
    assert export_rules(rules)[0]["msg"] == "Please enter a valid value."


def test_export_rules_json(email):
    rules = Rules(control=email).add_rule(":filled")
    payload = export_rules_json(rules)
    assert payload == '[{"op":":filled","msg":"This field is required."}]'
    assert json.loads(payload) == export_rules(rules)
