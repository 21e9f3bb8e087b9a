"""View Projector - shape table rows into page view models."""

from __future__ import annotations

from collections.abc import AsyncIterable
from typing import Any
from urllib.parse import quote_plus, urlsplit

import structlog

from dfhv.models import (
    DetailViewModel,
    HistoryEvent,
    HistoryItem,
    IndexItem,
    IndexViewModel,
    InstanceRecord,
)
from dfhv.params import INSTANCE_ID_PARAMETER, RequestFilter
from dfhv.routing import DETAIL_ACTION
from dfhv.timeutil import format_form_value

logger = structlog.get_logger()


class ViewProjector:
    """Build index and detail view models.

    The notification URL is injected explicitly. Its path is the base every
    detail link hangs off, and its query string (normally the system key)
    is appended verbatim so the link carries the same authorization.
    """

    def __init__(self, notification_url: str) -> None:
        parts = urlsplit(notification_url)
        self._base_path = parts.path.rstrip("/")
        self._auth_query = parts.query
        self._log = logger.bind(component="ViewProjector")

    def detail_url(self, instance_id: str, request_authority: str) -> str:
        """Build the absolute link to an instance's detail page.

        Args:
            instance_id: Instance to link to.
            request_authority: ``scheme://host[:port]`` of the current request.

        Returns:
            ``<authority><base path>/detail?instanceid=<id>[&<auth query>]``.
        """
        query = f"{INSTANCE_ID_PARAMETER}={quote_plus(instance_id)}"
        if self._auth_query:
            query += "&" + self._auth_query
        return f"{request_authority.rstrip('/')}{self._base_path}{DETAIL_ACTION}?{query}"

    async def project_list(
        self,
        rows: AsyncIterable[dict[str, Any]],
        request_filter: RequestFilter,
        request_authority: str,
    ) -> IndexViewModel:
        """Project Instances rows into the index view model, in storage order."""
        items: list[IndexItem] = []
        async for row in rows:
            record = InstanceRecord.from_row(row)
            items.append(
                IndexItem(
                    **record.model_dump(),
                    detail_url=self.detail_url(record.instance_id, request_authority),
                )
            )

        self._log.debug("Projected instances", rows=len(items))
        return IndexViewModel(
            code=request_filter.code,
            start_time=format_form_value(request_filter.start_time),
            end_time=format_form_value(request_filter.end_time),
            orchestrator_name=request_filter.orchestrator_name,
            items=items,
        )

    async def project_detail(
        self,
        instance_id: str,
        rows: AsyncIterable[dict[str, Any]],
        code: str | None = None,
    ) -> DetailViewModel:
        """Project History rows into the detail view model.

        Events are sorted by row key with plain string comparison, the order
        the table store keeps row keys in. The sort is stable and every event
        is kept.
        """
        events = [HistoryEvent.from_row(row) async for row in rows]
        events.sort(key=lambda event: event.row)

        self._log.debug("Projected history", instance_id=instance_id, rows=len(events))
        return DetailViewModel(
            instance_id=instance_id,
            code=code,
            items=[HistoryItem(**event.model_dump()) for event in events],
        )
