from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
from dataclasses import dataclass

from contrast_fixer.resolver.schemas import ContrastResolution


Severity = Literal["INFO", "WARN"]


@dataclass
class Issue:
    code: str
    severity: Severity
    message: str
    element: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


def describe_element(tag: str, text: str, limit: int = 32) -> str:
    """Short label for reports: <p> "Some text..." """
    snippet = " ".join((text or "").split())
    if len(snippet) > limit:
        snippet = snippet[: limit - 3] + "..."
    return f'<{tag}> "{snippet}"'


def issue_for_resolution(resolution: ContrastResolution, element: Optional[str] = None) -> Optional[Issue]:
    """Unchanged pairs produce no issue."""
    if not resolution.changed:
        return None
    if resolution.satisfied:
        return Issue(
            code="CONTRAST_FIXED",
            severity="INFO",
            message="Low-contrast colors adjusted.",
            element=element,
            meta=resolution.summary(),
        )
    return Issue(
        code="CONTRAST_EXHAUSTED",
        severity="WARN",
        message="Target contrast not reachable by brightness alone; best-effort colors applied.",
        element=element,
        meta=resolution.summary(),
    )


def unparseable_issue(value: str, element: Optional[str] = None) -> Issue:
    return Issue(
        code="COLOR_UNPARSEABLE",
        severity="WARN",
        message=f"Unsupported color value, element skipped: {value}",
        element=element,
        meta={"value": value},
    )


def issues_to_dict(issues: List[Issue]) -> List[Dict[str, Any]]:
    return [
        {
            "code": i.code,
            "severity": i.severity,
            "message": i.message,
            "element": i.element,
            "meta": i.meta or {},
        }
        for i in issues
    ]


def resolve_status(issues: List[Issue]) -> str:
    """
    PASS: nothing worse than INFO (fixed or untouched)
    WARN: at least one element left below target or skipped
    """
    if any(i.severity == "WARN" for i in issues):
        return "WARN"
    return "PASS"
