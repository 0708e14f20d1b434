import logging

import pytest

from contrast_fixer.api.runner import fix_element_contrast, fix_tree_contrast
from contrast_fixer.app.settings import Settings
from contrast_fixer.tools.style.background import find_ancestor_background_color
from contrast_fixer.tools.style.element import ElementNode

SETTINGS = Settings(policy="legacy_min_3", min_contrast_ratio=3.0, max_steps=200, log_level="WARNING")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # fix_tree_contrast installs its own root handler
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _gray_page(text_color="rgb(120, 120, 120)"):
    return {
        "tag": "body",
        "computed_style": {"background-color": "rgb(128, 128, 128)"},
        "children": [
            {"tag": "p", "text": "Low contrast", "computed_style": {"color": text_color}},
        ],
    }


def test_element_without_text_is_skipped():
    el = ElementNode(tag="div", text="   ", computed_style={"color": "rgb(120, 120, 120)"})

    assert fix_element_contrast(el) is None
    assert el.style == {}


def test_fix_element_writes_inline_styles():
    body = ElementNode.from_dict(_gray_page())
    p = body.children[0]

    res = fix_element_contrast(p)

    assert res.satisfied and res.changed
    assert p.style["background-color"] == "rgb(128, 128, 128)"
    assert p.style["color"] == f"rgb({res.text.r}, {res.text.g}, {res.text.b})"


def test_fix_element_leaves_readable_text_alone():
    el = ElementNode(tag="p", text="ok", computed_style={"color": "rgb(0, 0, 0)"})

    res = fix_element_contrast(el)

    assert res.changed is False
    assert el.style == {}


def test_fix_element_defaults_to_black_text():
    el = ElementNode(tag="p", text="no color set")
    res = fix_element_contrast(el)
    assert res.changed is False


def test_tree_report_for_fixed_page():
    report = fix_tree_contrast(_gray_page(), settings=SETTINGS)

    assert report["status"] == "PASS"
    assert report["policy"] == "legacy_min_3"
    assert report["threshold"] == 3.0
    assert report["visited"] == 1
    assert report["changed"] == 1
    assert [i["code"] for i in report["issues"]] == ["CONTRAST_FIXED"]
    assert report["issues"][0]["element"] == '<p> "Low contrast"'
    assert "color" in report["tree"]["children"][0]["style"]


def test_tree_skips_unparseable_colors():
    report = fix_tree_contrast(_gray_page(text_color="#777777"), settings=SETTINGS)

    assert report["status"] == "WARN"
    assert report["changed"] == 0
    assert [i["code"] for i in report["issues"]] == ["COLOR_UNPARSEABLE"]


def test_tree_children_inherit_fixed_background():
    root = ElementNode.from_dict(
        {
            "tag": "div",
            "text": "Blue on blue",
            "computed_style": {"background-color": "rgb(0, 0, 102)", "color": "rgb(0, 0, 120)"},
            "children": [
                {"tag": "span", "text": "Light", "computed_style": {"color": "rgb(200, 200, 200)"}},
            ],
        }
    )

    report = fix_tree_contrast(root, settings=SETTINGS)

    # blue can't reach 3:1 against its own hue; best effort is applied anyway
    assert root.style["background-color"] == "rgb(0, 0, 0)"
    assert root.style["color"] == "rgb(0, 0, 255)"
    span = root.children[0]
    assert find_ancestor_background_color(span) == "rgb(0, 0, 0)"
    assert span.style == {}

    assert report["status"] == "WARN"
    assert report["visited"] == 2
    assert report["changed"] == 1
    assert [i["code"] for i in report["issues"]] == ["CONTRAST_EXHAUSTED"]


def test_tree_uses_settings_threshold():
    strict = Settings(policy="wcag_aaa_text", min_contrast_ratio=7.0, max_steps=200, log_level="WARNING")

    report = fix_tree_contrast(_gray_page(), settings=strict)

    assert report["threshold"] == 7.0
    assert report["issues"][0]["meta"]["contrast_ratio"] >= 7.0
