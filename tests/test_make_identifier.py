"""Tests for escaping script paths into class names."""

import pytest

from script_finder.make_identifier import make_identifier
from script_finder.script_path_to_class_name import script_path_to_class_name


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("list", "list"),
        ("GET.html", "GET_html"),
        ("1.0.0", "_1_0_0"),
        ("my-component", "my_002dcomponent"),
        ("_x", "_005fx"),
        ("class", "class_"),
        ("for", "for_"),
        ("a$b", "a$b"),
        ("$x", "$x"),
        ("", "_"),
    ],
)
def test_make_identifier(segment: str, expected: str) -> None:
    """Verify escaping of individual path segments."""
    assert make_identifier(segment) == expected


def test_script_path_to_class_name() -> None:
    """Verify that path separators become dots between escaped segments."""
    assert (
        script_path_to_class_name("org.example.widget/1.0.0/GET.html")
        == "org_example_widget._1_0_0.GET_html"
    )
