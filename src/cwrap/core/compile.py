"""Route compilation: skeleton.json -> index.html + styles.css"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from cwrap.core.blueprint import DEFAULT_PLACEHOLDER
from cwrap.core.document import build_css, build_document, build_head
from cwrap.core.errors import MalformedJson, MalformedTemplate, MissingSkeleton, WriteFailure
from cwrap.core.markup import emit_body
from cwrap.core.models import CompiledPage, SkeletonRoot, StyleSheet
from cwrap.core.selectors import collect


logger = logging.getLogger(__name__)

SKELETON_FILE = "skeleton.json"
HTML_FILE = "index.html"
CSS_FILE = "styles.css"


def load_skeleton(route_dir: Path) -> dict[str, Any]:
    """Read and parse route_dir/skeleton.json; the top level must be an object."""
    path = route_dir / SKELETON_FILE
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingSkeleton("no skeleton.json", path) from e
    except UnicodeDecodeError as e:
        raise MalformedJson(f"not UTF-8: {e}", path) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedJson(f"invalid JSON: {e}", path) from e
    except RecursionError as e:
        raise MalformedJson("document nested too deeply", path) from e
    if not isinstance(data, dict):
        raise MalformedJson(f"expected a JSON object, got {type(data).__name__}", path)
    return data


def compile_skeleton(
    skeleton: dict[str, Any],
    depth: int = 0,
    placeholder: str = DEFAULT_PLACEHOLDER,
    sheet: Optional[StyleSheet] = None,
    ) -> CompiledPage:
    """Compile an in-memory skeleton into page markup and stylesheet text.

    `sheet` is the per-route accumulator; it is always emptied before returning.
    Tree shape errors (e.g. an `extend` entry without `extension`) surface as MalformedJson.
    """
    sheet = sheet if sheet is not None else StyleSheet()
    try:
        try:
            root = SkeletonRoot.model_validate(skeleton)
        except ValidationError as e:
            raise MalformedJson(f"invalid root fields: {e}") from e
        try:
            collect(skeleton, sheet, placeholder=placeholder)
            body = emit_body(skeleton, depth, placeholder)
        except (KeyError, TypeError, AttributeError, RecursionError) as e:
            raise MalformedJson(f"invalid node: {e!r}") from e
        html = build_document(build_head(root.head), body)
        css = build_css(root, sheet)
        return CompiledPage(html=html, css=css)
    finally:
        sheet.clear()


def write_page(page: CompiledPage, output_dir: Path) -> tuple[Path, Path]:
    """Write index.html and styles.css into output_dir, creating it if needed."""
    html_path = output_dir / HTML_FILE
    css_path = output_dir / CSS_FILE
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        html_path.write_text(page.html, encoding="utf-8")
        logger.info("Generated %s", html_path)
        css_path.write_text(page.css, encoding="utf-8")
        logger.info("Generated %s", css_path)
    except OSError as e:
        raise WriteFailure(f"could not write output: {e}", output_dir) from e
    return html_path, css_path


def compile_route(
    source_dir: Path,
    output_dir: Path,
    depth: int = 0,
    placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> Path:
    """Compile one route directory into output_dir. Returns the index.html path.

    depth is the number of directory levels between source_dir and the routes root;
    it positions the relative client script path.
    """
    skeleton = load_skeleton(source_dir)
    try:
        page = compile_skeleton(skeleton, depth, placeholder)
    except (MalformedJson, MalformedTemplate) as e:
        if e.path is None:
            e.path = source_dir / SKELETON_FILE
        raise
    html_path, _ = write_page(page, output_dir)
    return html_path
