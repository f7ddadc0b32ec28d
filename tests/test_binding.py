"""Tests for attaching click listeners to rendered content."""

import pytest
from cssselect import SelectorError
from lxml import etree

from reader_config.binding import bind_listeners, find_targets, parse_content
from reader_config.listeners import ClickListenerRegistration, ContentClickRegistry, Point

CHAPTER = b"""<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head><title>Chapter 1</title></head>
<body>
  <section class="quote" id="12345">First quote</section>
  <section class="quote" id="67890">Second quote</section>
  <p class="quote">Quote without id</p>
  <aside class="note" data-ref="n1">A note</aside>
</body>
</html>
"""


def make_listener(scheme, selector, attribute, calls=None, select_all=True):
    return ClickListenerRegistration(
        scheme_name=scheme,
        query_selector=selector,
        attribute_name=attribute,
        select_all=select_all,
        on_click=lambda value, point: calls.append((scheme, value, point)) if calls is not None else None,
    )


def test_parse_content_xhtml():
    """Test XHTML parses with plain local tag names."""
    root = parse_content(CHAPTER)
    assert root.tag == "html"
    assert root.find(".//aside").get("data-ref") == "n1"


def test_parse_content_accepts_text_and_elements():
    """Test text markup and parsed elements are both accepted."""
    root = parse_content(CHAPTER.decode("utf-8"))
    assert root.tag == "html"
    assert parse_content(root) is root
    assert parse_content("   ") is None


def test_bind_select_all():
    """Test select_all attaches to every match in document order."""
    bindings = bind_listeners(CHAPTER, [make_listener("quote", ".quote", "id")])
    assert [b.attribute_value for b in bindings] == ["12345", "67890", None]
    assert [b.element.tag for b in bindings] == ["section", "section", "p"]


def test_bind_first_match_only():
    """Test select_all=False attaches to the first match only."""
    bindings = bind_listeners(CHAPTER, [make_listener("quote", ".quote", "id", select_all=False)])
    assert len(bindings) == 1
    assert bindings[0].attribute_value == "12345"


def test_bind_no_matches():
    """Test a selector matching nothing attaches nothing."""
    assert bind_listeners(CHAPTER, [make_listener("fig", "figure.chart", "id")]) == []
    assert bind_listeners(b"", [make_listener("quote", ".quote", "id")]) == []


def test_bind_empty_attribute_name():
    """Test an empty attribute name yields None values."""
    bindings = bind_listeners(CHAPTER, [make_listener("note", "aside.note", "")])
    assert len(bindings) == 1
    assert bindings[0].attribute_value is None


def test_bind_keeps_registration_order():
    """Test bindings are grouped by registration order."""
    note = make_listener("note", ".note", "data-ref")
    quote = make_listener("quote", "section.quote", "id")
    bindings = bind_listeners(CHAPTER, [note, quote])
    assert [b.registration for b in bindings] == [note, quote, quote]


def test_binding_click_dispatches():
    """Test clicking a bound element reaches its listener through the registry."""
    calls = []
    registry = ContentClickRegistry()
    registry.register(make_listener("Quote", ".quote", "id", calls))

    bindings = bind_listeners(CHAPTER, registry.all_registrations())
    assert bindings[1].click(registry, Point(10, 20)) is True
    assert calls == [("Quote", "67890", Point(10, 20))]


def test_binding_click_shadowed_registration():
    """Test a shadowed registration's elements route to the first listener."""
    first_calls, second_calls = [], []
    registry = ContentClickRegistry()
    registry.register(make_listener("note", "aside.note", "data-ref", first_calls))
    registry.register(make_listener("note", "section.quote", "id", second_calls))

    bindings = bind_listeners(CHAPTER, registry.all_registrations())
    shadowed = [b for b in bindings if b.registration is registry.all_registrations()[1]]
    shadowed[0].click(registry, Point(0, 0))

    assert second_calls == []
    assert first_calls == [("note", "12345", Point(0, 0))]


def test_invalid_selector():
    """Test selector errors come from the selector engine."""
    root = parse_content(CHAPTER)
    with pytest.raises(SelectorError):
        find_targets(root, make_listener("bad", "section[", "id"))


def test_bind_skips_invalid_selector():
    """Test an invalid selector doesn't stop the other registrations from binding."""
    bad = make_listener("bad", "section[", "id")
    note = make_listener("note", ".note", "data-ref")
    bindings = bind_listeners(CHAPTER, [bad, note])
    assert [(b.registration, b.attribute_value) for b in bindings] == [(note, "n1")]


def test_find_targets_on_parsed_tree():
    """Test targets can be found on a tree parsed by the caller."""
    root = etree.HTML("<div><span class='term' title='t1'>x</span></div>")
    targets = find_targets(root, make_listener("term", "span.term", "title"))
    assert [t.get("title") for t in targets] == ["t1"]
