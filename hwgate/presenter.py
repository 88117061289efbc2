"""HTML rendering for a :class:`~hwgate.evaluator.Diagnosis`."""

from __future__ import annotations

import html
from string import Template

from .evaluator import Diagnosis

PAGE_TITLE = "UFirst - PC configuration check"

_PAGE = Template(
    """<!DOCTYPE html>
<html>
<head>
	<meta charset="utf-8">
	<title>$title</title>
</head>
<body>
	<h1>$title</h1>
$lines
</body>
</html>
"""
)


def render_html(diagnosis: Diagnosis, title: str = PAGE_TITLE) -> str:
    """Render the fixed page: header, summary, reason header, four slots.

    Blank lines (passing dimensions, or the reason header on success) are
    kept as empty ``<h2>`` elements so the layout never shifts.
    """
    lines = "\n".join(f"\t<h2>{html.escape(line)}</h2>" for line in diagnosis.lines)
    return _PAGE.substitute(title=html.escape(title), lines=lines)
