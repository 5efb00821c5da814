"""Langfuse integration for tracing search pipeline stages."""

import logging
from contextlib import contextmanager

from langfuse import Langfuse

from src.config.settings import settings

logger = logging.getLogger(__name__)

_langfuse_client: Langfuse | None = None


def get_langfuse() -> Langfuse | None:
    """Shared Langfuse client for search tracing, created on first use.

    Returns None when the Langfuse keys are unset or the client fails to start.
    """
    global _langfuse_client  # noqa: PLW0603

    if _langfuse_client is not None:
        return _langfuse_client

    if not settings.tracing_enabled:
        logger.debug("Langfuse keys not configured, tracing disabled.")
        return None

    try:
        _langfuse_client = Langfuse(
            public_key=settings.LANGFUSE_PUBLIC_KEY,
            secret_key=settings.LANGFUSE_SECRET_KEY,
            host=settings.LANGFUSE_HOST,
        )
        logger.info("Langfuse client initialized (host=%s)", settings.LANGFUSE_HOST)
        return _langfuse_client
    except Exception:
        logger.exception("Failed to initialise Langfuse client")
        return None


class LangfuseTracer:
    """Trace a search and its stages in Langfuse; no-ops when not configured.

    Usage::

        tracer = LangfuseTracer()
        with tracer.trace("search", input={"query": q}) as trace:
            with tracer.span(trace, "filter") as span:
                results = apply_filters(...)
                tracer.end_span(span, output={"matched": len(results)})
            tracer.end_trace(trace, output={"count": len(results)})
    """

    def __init__(self, client: Langfuse | None = None) -> None:
        self.client = client or get_langfuse()
        self.enabled = self.client is not None

    @contextmanager
    def trace(self, name: str, *, input: dict | None = None, metadata: dict | None = None):  # noqa: A002
        """Open the trace covering one search request.

        Yields the Langfuse trace, or an empty dict when tracing is off. A
        failing request flags the trace with ``error`` before re-raising.
        """
        if not self.enabled:
            yield {}
            return

        search_trace = self.client.trace(name=name, input=input, metadata=metadata or {})
        try:
            yield search_trace
        except Exception:
            search_trace.update(metadata={"error": True})
            raise
        finally:
            self.client.flush()

    def end_trace(self, trace, *, output=None):
        """Record the result envelope summary on the request trace."""
        if not self.enabled or not hasattr(trace, "update"):
            return
        trace.update(output=output)

    @contextmanager
    def span(self, trace, name: str, *, input: dict | None = None):  # noqa: A002
        """Time one pipeline stage as a child of the request trace."""
        if not self.enabled or not hasattr(trace, "span"):
            yield {}
            return

        stage = trace.span(name=name, input=input)
        try:
            yield stage
        except Exception:
            stage.update(metadata={"error": True})
            raise
        finally:
            stage.end()

    def end_span(self, span, *, output=None):
        """Record how many records a stage produced."""
        if not self.enabled or not hasattr(span, "update"):
            return
        span.update(output=output)


def shutdown() -> None:
    """Flush pending search traces and drop the shared client."""
    global _langfuse_client  # noqa: PLW0603
    if _langfuse_client is not None:
        _langfuse_client.flush()
        _langfuse_client.shutdown()
        _langfuse_client = None
        logger.info("Langfuse client shut down.")
