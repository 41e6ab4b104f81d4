"""Unit tests for core/markup.py"""

from cwrap.core.markup import emit, emit_body, script_tag


def test_emit_nested_divs():
    """Children render in order inside the parent."""
    html = emit({"element": "body", "children": [{"element": "div"}, {"element": "div"}]})
    assert html == "<body><div></div><div></div></body>"


def test_emit_blueprint_list():
    """A count-3 blueprint renders three substituted items."""
    html = emit({"element": "ul", "blueprint": {"count": 3, "element": "li", "text": "Item cwrapIndex"}})
    assert html == "<ul><li>Item 0</li><li>Item 1</li><li>Item 2</li></ul>"


def test_emit_class_and_attributes_in_order():
    """class comes first, then attributes in mapping order."""
    html = emit({"element": "a", "class": "btn", "attributes": {"href": "/x", "target": "_blank"}, "text": "Go"})
    assert html == '<a class="btn" href="/x" target="_blank">Go</a>'


def test_emit_self_closing_ignores_content():
    """Self-closing tags drop text, children, and blueprint."""
    html = emit({
        "element": "img",
        "class": "hero",
        "attributes": {"src": "a.png"},
        "text": "ignored",
        "children": [{"element": "span"}],
        "blueprint": {"count": 2, "element": "b"},
    })
    assert html == '<img class="hero" src="a.png" />'


def test_emit_content_order():
    """text, then blueprint instances, then children."""
    html = emit({
        "element": "div",
        "text": "T",
        "blueprint": {"count": 1, "element": "i"},
        "children": [{"element": "b"}],
    })
    assert html == "<div>T<i></i><b></b></div>"


def test_emit_inert_nodes():
    """Nodes without element render as nothing, including as children."""
    assert emit({"text": "x"}) == ""
    assert emit({"element": "p", "children": [{"text": "x"}]}) == "<p></p>"


def test_emit_text_is_literal():
    """Text and client placeholder tokens pass through unescaped."""
    html = emit({"element": "p", "text": "Hi <b>cwrapGetParams[name]</b>"})
    assert html == "<p>Hi <b>cwrapGetParams[name]</b></p>"


def test_emit_nested_blueprints():
    """Inner blueprints expand per outer instance, using the outer index."""
    html = emit({
        "element": "ul",
        "blueprint": {
            "count": 3,
            "element": "li",
            "blueprint": {"count": 2, "element": "span", "text": "cwrapIndex+1"},
        },
    })
    assert html == "<ul>" + "".join(f"<li><span>{i}</span><span>{i}</span></li>" for i in (1, 2, 3)) + "</ul>"


def test_script_tag_depth():
    """Script path climbs one directory per route level."""
    assert script_tag(0) == '<script src="scripts/cwrapFunctions.js" type="module"></script>'
    assert script_tag(2) == '<script src="../../scripts/cwrapFunctions.js" type="module"></script>'


def test_emit_body_appends_script():
    """emit_body adds the client script after the markup."""
    html = emit_body({"element": "body"}, depth=1)
    assert html == '<body></body><script src="../scripts/cwrapFunctions.js" type="module"></script>'


def test_emit_non_object_children_inert():
    """null, numbers, and strings in children render as nothing."""
    html = emit({"element": "body", "children": [None, 5, "plain element text", {"element": "p"}]})
    assert html == "<body><p></p></body>"
