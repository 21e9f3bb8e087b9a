"""Page rendering."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol

from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"

INDEX_TEMPLATE = "index.html"
DETAIL_TEMPLATE = "detail.html"


class Renderer(Protocol):
    """Protocol for turning a view model into HTML."""

    async def render(self, template_name: str, view_model: BaseModel) -> str:
        """Render a template.

        Args:
            template_name: Template file name.
            view_model: View model exposed to the template as ``vm``.

        Returns:
            Rendered HTML.
        """
        ...


def format_timestamp(dt: datetime | None) -> str:
    """Format a datetime for table cells (e.g., '2025-01-15 14:32:05').

    Args:
        dt: Datetime object or None.

    Returns:
        Formatted string or empty string if dt is None.
    """
    if dt is None:
        return ""
    return dt.strftime("%Y-%m-%d %H:%M:%S")


class JinjaRenderer:
    """Renderer backed by the packaged Jinja2 templates."""

    def __init__(self, directory: Path = TEMPLATES_DIR) -> None:
        self.templates = Jinja2Templates(directory=str(directory))
        self.templates.env.filters["format_timestamp"] = format_timestamp

    async def render(self, template_name: str, view_model: BaseModel) -> str:
        template = self.templates.get_template(template_name)
        return template.render(vm=view_model)
