from __future__ import annotations
import json
import logging
import os
import shutil
import sys
from string import Template
from typing import Dict, Iterator, List, Optional, TextIO
from .errors import RenderError
from .models import Node
from .utils import format_size

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
TEMPLATE_NAME = "scandisk.html"
STATIC_ASSETS = ["scandisk.js", "scandisk.css", "folder.svg", "file.svg"]

def display_name(name: str) -> str:
    """Undecodable bytes in *name* (lone surrogates from os.scandir) become U+FFFD."""
    try:
        raw = name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = name.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")

def node_label(node: Node, raw: bool = False) -> str:
    name = node.name if raw else display_name(node.name)
    return "%-10s %s" % (format_size(node.size), name)

# -------------------- Text --------------------
def iter_text_lines(node: Node, depth: int = 0) -> Iterator[str]:
    # names stay as scandir returned them; the stream decides how to encode them
    yield "  " * depth + node_label(node, raw=True)
    for child in node.children:
        yield from iter_text_lines(child, depth + 1)

def render_text(root: Node, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in iter_text_lines(root):
        out.write(line + "\n")

# -------------------- JSON / HTML --------------------
def node_to_dict(node: Node) -> Dict[str, object]:
    return {
        "text": node_label(node),
        "children": [node_to_dict(c) for c in node.children],
    }

def dump_json(root: Node) -> str:
    data = json.dumps(node_to_dict(root), separators=(",", ":"), ensure_ascii=False)
    # keep the payload from closing the surrounding <script> element
    return data.replace("</", "<\\/")

def load_template() -> str:
    path = os.path.join(ASSETS_DIR, TEMPLATE_NAME)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise RenderError("template file not found", e)

def render_html(root: Node, template_text: Optional[str] = None) -> str:
    if template_text is None:
        template_text = load_template()
    try:
        return Template(template_text).substitute(data=dump_json(root))
    except (KeyError, ValueError) as e:
        raise RenderError("render template failed", e)

def html_filename(name: str) -> str:
    return name if name.endswith(".html") else name + ".html"

def release_static_assets(dest_dir: str, assets: Optional[List[str]] = None) -> List[str]:
    written = []
    for fn in (STATIC_ASSETS if assets is None else assets):
        dst = os.path.join(dest_dir, fn)
        try:
            shutil.copyfile(os.path.join(ASSETS_DIR, fn), dst)
        except OSError as e:
            raise RenderError("release static assets failed", e)
        written.append(dst)
    return written

def write_html(root: Node, filename: str, template_text: Optional[str] = None) -> str:
    """Write the tree page to *filename* (.html appended) plus its assets.

    Assets land in the same directory as the page. Returns the page path.
    """
    out_path = html_filename(filename)
    page = render_html(root, template_text)
    try:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(page)
    except (OSError, UnicodeError) as e:
        raise RenderError(f"write {out_path} failed", e)
    dest_dir = os.path.dirname(os.path.abspath(out_path))
    release_static_assets(dest_dir)
    logger.info("wrote %s (%d nodes, %d bytes) and %d assets to %s",
                out_path, sum(1 for _ in root.walk()), len(page), len(STATIC_ASSETS), dest_dir)
    return out_path
