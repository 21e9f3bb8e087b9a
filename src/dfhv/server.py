"""FastAPI application for the history viewer."""

from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse

from dfhv import __version__
from dfhv.config import ViewerConfig
from dfhv.handler import HistoryViewer
from dfhv.projector import ViewProjector
from dfhv.render import JinjaRenderer, Renderer
from dfhv.store.base import TableStore
from dfhv.store.filesystem import FileSystemTableStore

# Every method reaches the handler so that unsupported ones answer 404, not 405.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    config: ViewerConfig | None = None,
    *,
    store: TableStore | None = None,
    renderer: Renderer | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Optional configuration. If not provided, loads from env.
        store: Table store. Defaults to the JSON-lines files in ``data_dir``.
        renderer: Page renderer. Defaults to the packaged Jinja2 templates.

    Returns:
        Configured FastAPI application.
    """
    if config is None:
        config = ViewerConfig()

    app = FastAPI(
        title="Durable Functions History Viewer",
        description="Read-only viewer for orchestration instances and their history",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    viewer = HistoryViewer(
        store=store if store is not None else FileSystemTableStore(config.data_dir),
        renderer=renderer if renderer is not None else JinjaRenderer(),
        projector=ViewProjector(config.notification_url),
        instances_table=config.instances_table,
        history_table=config.history_table,
    )

    app.state.config = config
    app.state.viewer = viewer

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def dispatch(request: Request) -> Response:
        """Hand every request to the viewer."""
        result = await get_viewer(request).handle(
            request.method,
            request.url.path,
            request.query_params.multi_items(),
            f"{request.url.scheme}://{request.url.netloc}",
        )
        if result.html is None:
            return Response(status_code=result.status_code)
        return HTMLResponse(result.html, status_code=result.status_code)

    return app


def get_viewer(request: Request) -> HistoryViewer:
    """Get the viewer from request.

    Args:
        request: FastAPI request.

    Returns:
        HistoryViewer instance.
    """
    return request.app.state.viewer

