from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union
from dotenv import load_dotenv

load_dotenv()  # Load .env file

from contrast_fixer.app.errors import InvalidColorInput
from contrast_fixer.app.logging import setup_logging
from contrast_fixer.app.settings import Settings, load_settings
from contrast_fixer.resolver.resolver import DEFAULT_THRESHOLD, resolve_contrast
from contrast_fixer.resolver.schemas import ContrastResolution
from contrast_fixer.resolver.search import DEFAULT_MAX_STEPS
from contrast_fixer.tools.audit.checks import (
    Issue,
    describe_element,
    issue_for_resolution,
    issues_to_dict,
    resolve_status,
    unparseable_issue,
)
from contrast_fixer.tools.style.apply import apply_resolution
from contrast_fixer.tools.style.background import find_ancestor_background_color
from contrast_fixer.tools.style.element import ElementNode
from contrast_fixer.tools.style.parse import parse_css_color

logger = logging.getLogger(__name__)

DEFAULT_TEXT_COLOR = "rgb(0, 0, 0)"


def fix_element_contrast(
    element: ElementNode,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Optional[ContrastResolution]:
    """
    Fix one element in place:
    - elements without text are skipped (None)
    - read effective text color + inherited background
    - resolve, and write both colors back when anything changed

    EXHAUSTED results are applied too: the best-effort pair still reads
    better than the original one. Raises InvalidColorInput for colors that
    are not rgb()/rgba().
    """
    if not element.has_text():
        return None

    background = parse_css_color(find_ancestor_background_color(element)).opaque()
    text = parse_css_color(element.get_style("color") or DEFAULT_TEXT_COLOR).opaque()

    resolution = resolve_contrast(background, text, threshold, max_steps=max_steps)
    if resolution.changed:
        apply_resolution(element, resolution)
    return resolution


def fix_tree_contrast(
    root: Union[ElementNode, Dict[str, Any]],
    *,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Minimal callable entrypoint:
    - load settings from env unless given
    - walk the tree in document order (parents first, so their new
      backgrounds are what children inherit)
    - fix every text element
    - return {status, threshold, policy, visited, changed, issues, tree}
    """
    s = settings or load_settings()
    setup_logging(s.log_level)

    tree = root if isinstance(root, ElementNode) else ElementNode.from_dict(root)

    issues: List[Issue] = []
    visited = 0
    changed = 0

    for element in tree.iter_tree():
        if not element.has_text():
            continue
        visited += 1
        label = describe_element(element.tag, element.text)
        try:
            resolution = fix_element_contrast(
                element,
                threshold=s.min_contrast_ratio,
                max_steps=s.max_steps,
            )
        except InvalidColorInput as e:
            logger.warning("skipping element with unsupported color", extra={"ctx": {"element": label, "error": str(e)}})
            issues.append(unparseable_issue(str(e), element=label))
            continue

        if resolution is None:
            continue
        if resolution.changed:
            changed += 1
        issue = issue_for_resolution(resolution, element=label)
        if issue:
            issues.append(issue)

    status = resolve_status(issues)
    logger.info(
        "contrast pass finished",
        extra={"ctx": {"status": status, "visited": visited, "changed": changed}},
    )

    return {
        "status": status,
        "threshold": s.min_contrast_ratio,
        "policy": s.policy,
        "visited": visited,
        "changed": changed,
        "issues": issues_to_dict(issues),
        "tree": tree.to_dict(),
    }
