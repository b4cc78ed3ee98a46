# request timing middleware

import time
import logging
import json
from typing import Callable, Optional
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.config import settings

logger = logging.getLogger(__name__)

# route prefix -> external API the request waits on
UPSTREAM_ROUTES = (
    ("/v1/location/auto", "ip-api"),
    ("/v1/location/geocode", "nominatim"),
    ("/v1/navigation/directions", "nominatim"),
    ("/v1/tools/get-auto-location", "ip-api"),
    ("/v1/tools/get-current-location", "nominatim"),
    ("/v1/tools/get-directions", "nominatim"),
)


def upstream_for(path: str) -> Optional[str]:
    for prefix, upstream in UPSTREAM_ROUTES:
        if path.startswith(prefix):
            return upstream
    return None


class PerformanceMonitoringMiddleware(BaseHTTPMiddleware):
    """
    Times every HTTP request

    Adds an X-Process-Time-Ms header and logs one JSON line per request.
    Requests that call out to ip-api or Nominatim are tagged with that
    upstream (X-Upstream header, "upstream" log field), so slow requests
    can be told apart from slow geocoders.
    """

    def __init__(self, app: ASGIApp, slow_threshold_ms: float = None):
        super().__init__(app)
        self.slow_threshold_ms = (
            slow_threshold_ms
            if slow_threshold_ms is not None
            else settings.SLOW_REQUEST_THRESHOLD_MS
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_time_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request raised: {request.method} {request.url.path}, "
                f"elapsed={elapsed_time_ms:.2f}ms, error={str(e)}",
                exc_info=True,
            )
            raise

        elapsed_time_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_time_ms:.2f}"
        upstream = upstream_for(request.url.path)
        if upstream:
            response.headers["X-Upstream"] = upstream
        self._log_request(request, response, elapsed_time_ms, upstream)

        return response

    def _log_request(
        self,
        request: Request,
        response: Response,
        elapsed_time_ms: float,
        upstream: Optional[str] = None,
    ) -> None:
        is_slow = elapsed_time_ms > self.slow_threshold_ms

        metrics = {
            "event": "http_request",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_time_ms": round(elapsed_time_ms, 2),
            "slow_request": is_slow,
            "upstream": upstream,
        }
        if request.query_params:
            metrics["query_params"] = dict(request.query_params)
        if request.client:
            metrics["client_host"] = request.client.host

        if is_slow:
            waiting_on = f", waiting on {upstream}" if upstream else ""
            logger.warning(
                f"Slow request: {request.method} {request.url.path}, "
                f"elapsed={elapsed_time_ms:.2f}ms (threshold {self.slow_threshold_ms}ms)"
                f"{waiting_on}"
            )

        logger.info(f"PERFORMANCE: {json.dumps(metrics, ensure_ascii=False)}")
