# File: page_scout/report/__init__.py
"""page_scout.report: генерация отчётов (JSON и HTML) для CLI."""

from page_scout.report.html_report import render_html
from page_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
