"""
Unit tests for the template renderer.
"""

import pytest

from cloud_deployer.core.binder import bind
from cloud_deployer.core.exceptions import UnboundVariableError
from cloud_deployer.core.renderer import find_placeholders, render


class TestFindPlaceholders:

    def test_returns_names_in_first_appearance_order(self):
        template = "${b} ${a} ${b} ${c_1}"

        assert find_placeholders(template) == ["b", "a", "c_1"]

    def test_escaped_placeholders_are_skipped(self):
        assert find_placeholders("$${literal} ${real}") == ["real"]

    def test_text_without_placeholders(self):
        assert find_placeholders("image: node:16 $HOME {x}") == []


class TestRender:

    def test_substitutes_every_placeholder(self):
        result = render("image: node:${nodeVersion}\nname: ${name}", {"nodeVersion": "16", "name": "web"})

        assert result == "image: node:16\nname: web"

    def test_repeated_placeholder_is_substituted_everywhere(self):
        assert render("${x}-${x}", {"x": "a"}) == "a-a"

    def test_extra_binding_keys_are_ignored(self):
        assert render("${a}", {"a": "1", "unused": "2"}) == "1"

    def test_missing_variable_raises_with_its_name(self):
        with pytest.raises(UnboundVariableError) as exc_info:
            render("image: ${missingVar}", {"other": "x"})

        assert exc_info.value.name == "missingVar"
        assert exc_info.value.kind == "UnboundVariable"
        assert "missingVar" in str(exc_info.value)

    def test_first_missing_variable_in_template_order_is_reported(self):
        with pytest.raises(UnboundVariableError) as exc_info:
            render("${present} ${second} ${first}", {"present": "p"})

        assert exc_info.value.name == "second"
        assert exc_info.value.missing == ["second", "first"]

    def test_escape_renders_literal_placeholder(self):
        result = render("env: $${HOME} app: ${app}", {"app": "shop"})

        assert result == "env: ${HOME} app: shop"

    def test_escaped_placeholder_does_not_need_binding(self):
        assert render("$${unbound}", {}) == "${unbound}"

    def test_rendering_is_deterministic(self, store, make_config):
        template = store.resolve_template("aws")
        binding = bind(make_config())

        assert render(template, binding) == render(template, binding)

    def test_substituted_values_are_not_rescanned(self):
        result = render("${a}", {"a": "${b}"})

        assert result == "${b}"


class TestMalformedPlaceholders:

    @pytest.mark.parametrize("template, name", [
        ("image: openjdk:${java-version}", "java-version"),
        ("name: ${ appLabel }", " appLabel "),
        ("app: ${app.label}", "app.label"),
        ("empty: ${}", ""),
    ])
    def test_non_identifier_placeholder_is_unbound(self, template, name):
        with pytest.raises(UnboundVariableError) as exc_info:
            render(template, {"appLabel": "shop", "javaVersion": "17"})

        assert exc_info.value.name == name

    def test_non_identifier_placeholder_is_listed(self):
        assert find_placeholders("${app.label} ${appLabel}") == ["app.label", "appLabel"]

    def test_escaped_non_identifier_renders_literally(self):
        assert render("$${java-version}", {}) == "${java-version}"
