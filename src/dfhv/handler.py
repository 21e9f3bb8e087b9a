"""Request handling: route, extract, query, project, render."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from dfhv import query
from dfhv.exceptions import CollectionNotFoundError
from dfhv.params import RequestFilter, extract
from dfhv.projector import ViewProjector
from dfhv.render import DETAIL_TEMPLATE, INDEX_TEMPLATE, Renderer
from dfhv.routing import Route, route
from dfhv.store.base import TableStore

logger = structlog.get_logger()


@dataclass(frozen=True)
class ViewerResponse:
    """Outcome of one request: a rendered page or a bodiless 404."""

    status_code: int
    html: str | None = None

    @classmethod
    def not_found(cls) -> ViewerResponse:
        return cls(status_code=404)

    @classmethod
    def ok(cls, html: str) -> ViewerResponse:
        return cls(status_code=200, html=html)


class HistoryViewer:
    """Serve the index and detail pages of one task hub.

    Holds no per-request state, so one instance serves concurrent requests.
    Storage and render failures propagate to the caller unchanged, except a
    table that disappears between the existence check and the query, which
    is answered like any other missing table.
    """

    def __init__(
        self,
        store: TableStore,
        renderer: Renderer,
        projector: ViewProjector,
        *,
        instances_table: str,
        history_table: str,
    ) -> None:
        self.store = store
        self.renderer = renderer
        self.projector = projector
        self.instances_table = instances_table
        self.history_table = history_table
        self._log = logger.bind(component="HistoryViewer")

    async def handle(
        self,
        method: str,
        path: str,
        query_pairs: Iterable[tuple[str, str]],
        request_authority: str,
    ) -> ViewerResponse:
        """Handle one request.

        Args:
            method: HTTP method.
            path: Request path.
            query_pairs: Raw query pairs in original order.
            request_authority: ``scheme://host[:port]`` of the request.

        Returns:
            ViewerResponse with rendered HTML, or 404.
        """
        request_filter = extract(query_pairs)
        selected = route(method, path, request_filter.instance_id)
        self._log.debug("Routed request", method=method, path=path, route=selected.value)

        if selected is Route.LIST:
            return await self.list_instances(request_filter, request_authority)
        if selected is Route.DETAIL:
            return await self.show_history(request_filter)
        return ViewerResponse.not_found()

    async def list_instances(
        self, request_filter: RequestFilter, request_authority: str
    ) -> ViewerResponse:
        """Render the instance list for a filter."""
        if not await self.store.collection_exists(self.instances_table):
            self._log.info("Table not found", table=self.instances_table)
            return ViewerResponse.not_found()

        predicate = query.build(request_filter)
        self._log.debug(
            "Querying instances",
            table=self.instances_table,
            filter=predicate.to_filter_string(),
        )
        rows = self.store.query_by_predicate(self.instances_table, predicate)
        try:
            vm = await self.projector.project_list(rows, request_filter, request_authority)
        except CollectionNotFoundError:
            # Table dropped after the existence check
            self._log.info("Table not found", table=self.instances_table)
            return ViewerResponse.not_found()

        html = await self.renderer.render(INDEX_TEMPLATE, vm)
        return ViewerResponse.ok(html)

    async def show_history(self, request_filter: RequestFilter) -> ViewerResponse:
        """Render the full event history of one instance."""
        instance_id = request_filter.instance_id
        if not instance_id:
            return ViewerResponse.not_found()

        if not await self.store.collection_exists(self.history_table):
            self._log.info("Table not found", table=self.history_table)
            return ViewerResponse.not_found()

        rows = self.store.query_by_partition_key(self.history_table, instance_id)
        try:
            vm = await self.projector.project_detail(instance_id, rows, request_filter.code)
        except CollectionNotFoundError:
            self._log.info("Table not found", table=self.history_table)
            return ViewerResponse.not_found()

        html = await self.renderer.render(DETAIL_TEMPLATE, vm)
        return ViewerResponse.ok(html)
