"""Search pipeline: Filter → Text search → Discovery → Sort & limit."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from src.models.api_models import SearchRequest
from src.observability.langfuse_client import LangfuseTracer
from src.search.constraints import parse_filters
from src.search.discovery import FOUND_AT_FIELD, annotate_discovery
from src.search.filter_engine import apply_filters
from src.search.sort_limit import limit_records, sort_records
from src.search.text_search import DEFAULT_SEARCH_FIELDS, text_search

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class SearchConfig:
    """Defaults applied when a request leaves a field unset."""

    sort_by: str = FOUND_AT_FIELD
    order: str = "asc"
    limit: int = 50
    search_fields: tuple[str, ...] = DEFAULT_SEARCH_FIELDS


@dataclass
class SearchResult:
    count: int
    items: list[dict[str, Any]] = field(default_factory=list)


class SearchPipeline:
    """Evaluate search requests against a read-only snapshot of records."""

    def __init__(
        self,
        config: SearchConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
        tracer: LangfuseTracer | None = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.clock = clock
        self.tracer = tracer or LangfuseTracer()

    def run(self, records: Sequence[dict[str, Any]], request: SearchRequest) -> SearchResult:
        """Run every stage over ``records`` and build the result envelope.

        Args:
            records: Snapshot of the collection; never modified.
            request: Parsed search request.

        Returns:
            SearchResult whose ``count`` is the number of matches before
            truncation and whose ``items`` holds at most ``limit`` records.

        Raises:
            SearchError: if a filter cannot be parsed.
        """
        sort_by = self.config.sort_by if request.sort_by is None else request.sort_by
        order = self.config.order if request.order is None else request.order
        limit = self.config.limit if request.limit is None else request.limit

        trace_input = request.model_dump(by_alias=True, exclude_none=True)
        with self.tracer.trace("search", input=trace_input) as trace:
            constraints = parse_filters(request.filters)

            with self.tracer.span(trace, "filter", input={"fields": list(constraints)}) as span:
                results = apply_filters(records, constraints)
                self.tracer.end_span(span, output={"matched": len(results)})

            with self.tracer.span(trace, "text_search", input={"query": request.query}) as span:
                results = text_search(results, request.query, self.config.search_fields)
                self.tracer.end_span(span, output={"matched": len(results)})

            with self.tracer.span(trace, "discovery") as span:
                results = annotate_discovery(results, self.clock())
                self.tracer.end_span(span, output={"annotated": len(results)})

            with self.tracer.span(
                trace, "sort_limit", input={"sort_by": sort_by, "order": order, "limit": limit}
            ) as span:
                results = sort_records(results, sort_by, order)
                count, items = limit_records(results, limit)
                self.tracer.end_span(span, output={"count": count, "returned": len(items)})

            self.tracer.end_trace(trace, output={"count": count, "returned": len(items)})

        logger.info(
            "Search over %d records: %d matches, returning %d (sort=%s %s)",
            len(records),
            count,
            len(items),
            sort_by,
            order,
        )
        return SearchResult(count=count, items=items)
