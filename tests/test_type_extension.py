"""
Tests for types that extend another type.
"""

from unittest.mock import Mock

import pytest

from form_config import ComputedOptions, ConfigError, NotFound, StaticOptions


def test_extending_a_missing_type_fails(config):
    with pytest.raises(NotFound):
        config.set_type({"name": "child", "extends": "missing"})


def test_not_found_is_a_config_error(config):
    with pytest.raises(ConfigError):
        config.set_type({"name": "child", "extends": "missing", "template": "<b></b>"})


def test_child_inherits_unset_fields(config):
    config.set_type({
        "name": "parent",
        "template": "<input />",
        "wrapper": ["label", "hasError"],
        "data": {"a": 1, "nested": {"x": 1}},
    })
    child = config.set_type({"name": "child", "extends": "parent", "data": {"nested": {"y": 2}}})
    assert child.template == "<input />"
    assert child.wrapper == ["label", "hasError"]
    assert child.data == {"nested": {"y": 2, "x": 1}, "a": 1}
    assert child.extends == "parent"


def test_child_template_url_blocks_parent_template(config):
    config.set_type({"name": "parent", "template": "<input />"})
    child = config.set_type({"name": "child", "extends": "parent", "templateUrl": "child.html"})
    assert child.template_url == "child.html"
    assert child.template is None


def test_parent_is_not_mutated_by_extension(config):
    parent = config.set_type({"name": "parent", "template": "<input />", "data": {"a": 1}})
    config.set_type({"name": "child", "extends": "parent", "data": {"b": 2}})
    assert parent.data == {"a": 1}


def test_controller_is_inherited_by_reference(config):
    parent_ctrl = Mock()
    config.set_type({"name": "parent", "template": "<input />", "controller": parent_ctrl})
    child = config.set_type({"name": "child", "extends": "parent"})
    assert child.controller is parent_ctrl


def test_controllers_compose_parent_first_on_shared_scope(config):
    calls = []

    def parent_ctrl(scope):
        calls.append("parent")
        scope["value"] = "parent"
        scope["parent_only"] = True

    def child_ctrl(scope):
        calls.append(("child", scope["value"]))
        scope["value"] = "child"

    config.set_type({"name": "parent", "template": "<input />", "controller": parent_ctrl})
    child = config.set_type({"name": "child", "extends": "parent", "controller": child_ctrl})

    scope = {}
    child.controller(scope)
    assert calls == ["parent", ("child", "parent")]
    assert scope == {"value": "child", "parent_only": True}


def test_composed_controller_uses_the_injected_instantiator(config):
    parent_ctrl, child_ctrl = object(), object()
    config.set_type({"name": "parent", "template": "<input />", "controller": parent_ctrl})
    child = config.set_type({"name": "child", "extends": "parent", "controller": child_ctrl})

    instantiate = Mock()
    scope = {}
    child.controller(scope, instantiate)
    assert [call.args for call in instantiate.call_args_list] == [(parent_ctrl, scope), (child_ctrl, scope)]


def test_links_compose_parent_first_with_same_arguments(config):
    calls = []
    config.set_type({"name": "parent", "template": "<input />", "link": lambda *args, **kwargs: calls.append(("parent", args, kwargs))})
    config.set_type({"name": "child", "extends": "parent", "link": lambda *args, **kwargs: calls.append(("child", args, kwargs))})

    config.get_type("child").link("scope", "el", attrs={"a": 1})
    assert calls == [
        ("parent", ("scope", "el"), {"attrs": {"a": 1}}),
        ("child", ("scope", "el"), {"attrs": {"a": 1}}),
    ]


def test_link_is_inherited_by_reference(config):
    link = Mock()
    config.set_type({"name": "parent", "template": "<input />", "link": link})
    assert config.set_type({"name": "child", "extends": "parent"}).link is link


def test_function_parent_and_function_child_chain(config):
    config.set_type({"name": "parent", "template": "<input />", "defaultOptions": lambda options: {"from_parent": options.get("key")}})
    config.set_type({"name": "child", "extends": "parent", "defaultOptions": lambda options: {"wrapped": options}})

    default_options = config.get_type("child").default_options
    assert isinstance(default_options, ComputedOptions)
    assert default_options.resolve({"key": "email"}) == {"wrapped": {"from_parent": "email"}}


def test_function_parent_and_static_child_static_wins(config):
    def parent_do(options):
        return {"x": 0, "y": 2, "nested": {"a": 1}}

    config.set_type({"name": "A", "template": "<input />", "defaultOptions": parent_do})
    config.set_type({"name": "B", "extends": "A", "defaultOptions": {"x": 1, "nested": {"b": 2}}})

    assert config.get_type("B").default_options.resolve({}) == {"x": 1, "y": 2, "nested": {"b": 2, "a": 1}}


def test_function_parent_and_absent_child_calls_parent(config):
    parent_do = Mock(return_value={"x": 1})
    config.set_type({"name": "A", "template": "<input />", "defaultOptions": parent_do})
    config.set_type({"name": "B", "extends": "A"})

    assert config.get_type("B").default_options.resolve({"key": "k"}) == {"x": 1}
    parent_do.assert_called_once_with({"key": "k"})


def test_static_parent_and_function_child_context_wins(config):
    child_do = Mock(return_value={"result": True})
    config.set_type({"name": "A", "template": "<input />", "defaultOptions": {"x": 1, "y": 1}})
    config.set_type({"name": "B", "extends": "A", "defaultOptions": child_do})

    context = {"y": 2}
    assert config.get_type("B").default_options.resolve(context) == {"result": True}
    child_do.assert_called_once_with({"y": 2, "x": 1})
    assert context == {"y": 2}


def test_static_parent_and_static_child_merge(config):
    config.set_type({"name": "A", "template": "<input />", "defaultOptions": {"x": 1, "templateOptions": {"type": "text"}}})
    child = config.set_type({"name": "B", "extends": "A", "defaultOptions": {"templateOptions": {"label": "B"}}})

    assert child.default_options == StaticOptions({"templateOptions": {"label": "B", "type": "text"}, "x": 1})


def test_static_parent_and_absent_child_copies_parent(config):
    parent = config.set_type({"name": "A", "template": "<input />", "defaultOptions": {"x": 1}})
    child = config.set_type({"name": "B", "extends": "A"})

    assert child.default_options == StaticOptions({"x": 1})
    assert child.default_options is not parent.default_options


def test_absent_parent_keeps_child_function(config):
    child_do = Mock(return_value={})
    config.set_type({"name": "A", "template": "<input />"})
    child = config.set_type({"name": "B", "extends": "A", "defaultOptions": child_do})

    assert child.default_options.func is child_do


def test_multi_level_chain_carries_every_ancestor(config):
    calls = []
    config.set_type({"name": "base", "template": "<input />", "controller": lambda scope: calls.append("base"), "data": {"base": True}})
    config.set_type({"name": "middle", "extends": "base", "controller": lambda scope: calls.append("middle")})
    leaf = config.set_type({"name": "leaf", "extends": "middle", "controller": lambda scope: calls.append("leaf")})

    leaf.controller({})
    assert calls == ["base", "middle", "leaf"]
    assert leaf.template == "<input />"
    assert leaf.data == {"base": True}


@pytest.mark.parametrize("parent_data, child_data", [
    ("parent-bag", {"k": 1}),
    ({"k": 0, "other": 2}, "child-bag"),
    (["a"], {"k": 1}),
])
def test_non_dict_data_keeps_the_child_value(config, parent_data, child_data):
    config.set_type({"name": "parent", "template": "<input />", "data": parent_data})
    child = config.set_type({"name": "child", "extends": "parent", "data": child_data})
    assert child.data == child_data
    assert config.get_type("child") is child


def test_non_dict_parent_data_is_inherited_when_child_has_none(config):
    config.set_type({"name": "parent", "template": "<input />", "data": "parent-bag"})
    assert config.set_type({"name": "child", "extends": "parent"}).data == "parent-bag"
