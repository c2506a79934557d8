from __future__ import annotations

from pathlib import Path
from typing import List
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.pipeline import CheckResult

def render_report(results: List[CheckResult]) -> str:
    env = Environment(
        loader=PackageLoader("ibanray.reporting", "templates"),
        autoescape=select_autoescape(["html", "j2"])
    )
    tmpl = env.get_template("report.html.j2")
    invalid = sum(1 for r in results if not r.is_valid)
    return tmpl.render(results=results, total=len(results), invalid=invalid)

def write_report(results: List[CheckResult], path: Path) -> None:
    html = render_report(results)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html)
