"""Unit tests for result pretty-printing."""

from querypad.utils.rendering import render_result


def test_render_single_field_object():
    assert render_result({"a": 1}) == '{\n  "a": 1\n}'


def test_render_keeps_key_order_as_received():
    rendered = render_result({"zeta": 1, "alpha": 2})
    assert rendered.index('"zeta"') < rendered.index('"alpha"')


def test_render_nested_values():
    assert render_result({"rows": [1]}) == '{\n  "rows": [\n    1\n  ]\n}'


def test_render_scalars_and_unicode():
    assert render_result("naïve") == '"naïve"'
    assert render_result(None) == "null"
    assert render_result([]) == "[]"
