"""HTML emission from a skeleton tree"""

from cwrap.core.blueprint import DEFAULT_PLACEHOLDER, iter_instances


SELF_CLOSING = {"img", "br", "hr", "input", "meta", "link"}
CLIENT_SCRIPT = "scripts/cwrapFunctions.js"


def _open_tag(node: dict) -> str:
    """Return `<tag class=".." k="v" ...` without the closing bracket."""
    parts = [f"<{node['element']}"]
    if "class" in node:
        parts.append(f' class="{node["class"]}"')
    for key, value in node.get("attributes", {}).items():
        parts.append(f' {key}="{value}"')
    return "".join(parts)


def emit(node: dict, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render node and its blueprint instances and children as markup; text is emitted verbatim."""
    if not isinstance(node, dict) or "element" not in node:
        return ""

    element = node["element"]
    html = _open_tag(node)
    if element in SELF_CLOSING:
        return html + " />"

    html += ">"
    if "text" in node:
        html += str(node["text"])
    if "blueprint" in node:
        html += "".join(emit(inst, placeholder) for inst in iter_instances(node["blueprint"], placeholder))
    for child in node.get("children", []):
        html += emit(child, placeholder)
    return html + f"</{element}>"


def script_tag(depth: int) -> str:
    """Module script tag for the client placeholder script, relative to a route `depth` levels deep."""
    return f'<script src="{"../" * depth}{CLIENT_SCRIPT}" type="module"></script>'


def emit_body(node: dict, depth: int = 0, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Emit the page body followed by the client script tag."""
    return emit(node, placeholder) + script_tag(depth)
