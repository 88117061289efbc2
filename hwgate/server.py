"""
HTTP front end for the hardware requirement check.

Every request to ``/`` takes a fresh hardware snapshot, evaluates it
against the policy and answers with an HTML page.

Usage::

    from hwgate.server import run_server
    run_server(port=8080)

    # Then:
    # curl localhost:8080/
    # curl localhost:8080/v1/diagnosis
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from fastapi import Request

from .evaluator import Diagnosis, evaluate
from .hardware import HardwareProbe, HardwareSnapshot
from .policy import DEFAULT_REQUIREMENTS, Requirements
from .presenter import render_html

logger = logging.getLogger(__name__)

ROOT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class SnapshotSource(Protocol):
    def snapshot(self) -> HardwareSnapshot: ...


# ---------------------------------------------------------------------------
# FastAPI app factory
# ---------------------------------------------------------------------------


@dataclass
class ServerState:
    """Per-app state.  The policy is read-only; the counter is lock-guarded."""

    policy: Requirements = DEFAULT_REQUIREMENTS
    probe_factory: Callable[[], SnapshotSource] = HardwareProbe
    start_time: float = field(default_factory=time.time)
    request_count: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


def diagnose(state: ServerState) -> Diagnosis:
    """Probe -> evaluate.  A new probe per call, nothing is cached."""
    with state.lock:
        state.request_count += 1
    snapshot = state.probe_factory().snapshot()
    diagnosis = evaluate(snapshot, state.policy)
    if diagnosis.meets:
        logger.info("Requirements met")
    else:
        logger.info(
            "Requirements not met: %s",
            ", ".join(d.value for d in diagnosis.failed_dimensions),
        )
    return diagnosis


def create_app(
    *,
    policy: Requirements = DEFAULT_REQUIREMENTS,
    probe_factory: Callable[[], SnapshotSource] = HardwareProbe,
) -> Any:
    """Create a FastAPI app serving the requirement check.

    Parameters
    ----------
    policy:
        Thresholds to evaluate against.  Defaults to the built-in policy.
    probe_factory:
        Zero-argument callable returning an object with ``snapshot()``.
        Called once per request.
    """
    from fastapi import FastAPI
    from fastapi.responses import HTMLResponse

    state = ServerState(policy=policy, probe_factory=probe_factory)

    app = FastAPI(title="hwgate", version="1.0.0")
    app.state.hwgate = state

    # Sync handlers: FastAPI runs them in its threadpool, so a slow probe
    # only stalls its own request.
    @app.api_route("/", methods=ROOT_METHODS, response_class=HTMLResponse)
    def check_system(request: Request) -> Any:
        response = HTMLResponse(render_html(diagnose(state)))
        if request.method == "HEAD":
            # Headers (Content-Length included) describe the full page.
            response.body = b""
        return response

    @app.get("/v1/diagnosis")
    def diagnosis_json() -> dict[str, Any]:
        return diagnose(state).to_dict()

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "requests_served": state.request_count,
            "uptime_seconds": int(time.time() - state.start_time),
            "requirements": state.policy.to_dict(),
        }

    return app


def run_server(
    *,
    host: str = "0.0.0.0",
    port: int = 8080,
    policy: Requirements = DEFAULT_REQUIREMENTS,
    log_level: str = "info",
) -> None:
    """Start the server (blocking).  A bind failure propagates from uvicorn."""
    import uvicorn

    app = create_app(policy=policy)
    display_host = "localhost" if host in ("0.0.0.0", "") else host
    logger.info("Server is running on http://%s:%d", display_host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level)
