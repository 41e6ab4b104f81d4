"""Document head, page wrapper, and stylesheet assembly"""

from cwrap.core.models import FontFace, Head, SkeletonRoot, StyleSheet


STYLESHEET_LINK = '<link rel="stylesheet" href="styles.css">'


def _attrs(mapping: dict) -> str:
    return "".join(f' {k}="{v}"' for k, v in mapping.items())


def build_head(head: Head) -> str:
    """Render <head> with title, link and meta entries, then the route stylesheet link."""
    lines = ["<head>"]
    if head.title:
        lines.append(f"<title>{head.title}</title>")
    lines.extend(f"    <link{_attrs(link)}>" for link in head.link)
    lines.extend(f"    <meta{_attrs(meta)}>" for meta in head.meta)
    lines.append(f"    {STYLESHEET_LINK}")
    lines.append("</head>")
    return "\n".join(lines)


def build_document(head_html: str, body_html: str) -> str:
    return f'<!DOCTYPE html>\n<html lang="en">\n{head_html}\n{body_html}\n</html>\n'


def font_face_css(font: FontFace) -> str:
    """Render one @font-face block; extra descriptors follow the standard three."""
    lines = [f'    font-family: "{font.family}";', f"    src: {font.src};"]
    if font.display is not None:
        lines.append(f"    font-display: {font.display};")
    lines.extend(f"    {k}: {v};" for k, v in (font.model_extra or {}).items())
    return "@font-face {\n" + "\n".join(lines) + "\n}\n"


def root_css(variables: dict) -> str:
    body = "".join(f"{k}: {v};\n" for k, v in variables.items())
    return f":root {{\n{body}}}\n"


def build_css(root: SkeletonRoot, sheet: StyleSheet) -> str:
    """Assemble the stylesheet: fonts, :root, classroom, collected rules, then @media blocks.

    Classroom media queries are merged into sheet under the rule's selector, after
    the rules collected from the tree.
    """
    parts = [font_face_css(f) for f in root.fonts]
    if root.root:
        parts.append(root_css(root.root))

    for rule in root.classroom:
        parts.append(f"{rule.selector} {{{rule.style}}}\n")
        for mq in rule.media_queries:
            sheet.set_media_rule(mq.query, rule.selector, mq.style)

    parts.extend(f"{selector} {{{style}}}\n" for selector, style in sheet.selectors.items())

    for query, rules in sheet.media.items():
        inner = "".join(f"  {selector} {{{style}}}\n" for selector, style in rules.items())
        parts.append(f"@media ({query}) {{\n{inner}}}\n")
    return "".join(parts)
