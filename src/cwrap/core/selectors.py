"""CSS selector derivation and style collection over a skeleton tree"""

from typing import Optional

from cwrap.core.blueprint import DEFAULT_PLACEHOLDER, iter_instances
from cwrap.core.models import StyleSheet


LANDMARK_ELEMENTS = {"body", "main", "footer"}


def node_selector(node: dict, parent: str, div_counts: list[int]) -> str:
    """Extend parent with this node's step; bumps the div counter for the current level."""
    element = node["element"]
    if element in LANDMARK_ELEMENTS:
        selector = f"{parent} > {element}" if parent else element
    elif element == "div":
        if not div_counts:
            div_counts.append(0)
        div_counts[-1] += 1
        selector = f"{parent} > div:nth-of-type({div_counts[-1]})"
    else:
        selector = f"{parent} > {element}"

    if "class" in node:
        selector += f".{node['class']}"
    return selector


def collect(
    node: dict,
    sheet: StyleSheet,
    parent: str = "",
    div_counts: Optional[list[int]] = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> str:
    """Record node's style, extend, and mediaQueries rules into sheet; recurse.

    Nodes without an `element` are inert and return parent unchanged. Blueprint
    instances share the current div counter level; children get a fresh one.
    Later writes to an existing selector replace the earlier declarations.
    """
    if div_counts is None:
        div_counts = []
    if not isinstance(node, dict) or "element" not in node:
        return parent

    selector = node_selector(node, parent, div_counts)

    if "style" in node:
        sheet.set_rule(selector, node["style"])

    for ext in node.get("extend", []):
        sheet.set_rule(f"{selector}{ext['extension']}", ext["style"])

    for mq in node.get("mediaQueries", []):
        sheet.set_media_rule(mq["query"], selector, mq["style"])

    if "blueprint" in node:
        for instance in iter_instances(node["blueprint"], placeholder):
            collect(instance, sheet, selector, div_counts, placeholder)

    if "children" in node:
        div_counts.append(0)
        for child in node["children"]:
            collect(child, sheet, selector, div_counts, placeholder)
        div_counts.pop()

    return selector
