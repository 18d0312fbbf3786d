"""Main application module for dxclparser.

This module defines the FastAPI application, registers middleware,
defines REST endpoints for parsing cluster lines, and mounts an MCP
server exposing the same operations.  The app is built by
``create_app`` and exposed as a module-level variable named ``app`` so
that ASGI servers like Uvicorn can discover it automatically.
"""

from __future__ import annotations

import os
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from fastapi_mcp import FastApiMCP

from .errors import ParseError
from .feed import clean_line, parse_lines
from .middleware import RequestLogMiddleware
from .middleware.logging import log_warning
from .models.api import BatchParseRequest, ParseRequest
from .parser import parse, parse_rbn


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
API_KEY = os.getenv("DXCL_API_KEY")


def _error_detail(e: ParseError) -> dict:
    return {"kind": e.kind.value, "message": e.message, "field": e.field}


def _unprocessable(e: ParseError, raw: str) -> HTTPException:
    if not e.kind.expected:
        log_warning("spot_parse_anomaly", kind=e.kind.value, error=e.message, raw=raw)
    return HTTPException(status_code=422, detail=_error_detail(e))


def create_app(api_key: Optional[str] = API_KEY) -> FastAPI:
    """Factory function for constructing the FastAPI application.

    The returned application includes CORS middleware, request logging,
    optional API key authentication, and the parse endpoints.  The MCP
    server is mounted with the operation identifiers defined on the
    route decorators.
    """
    app = FastAPI(title="dxclparser")

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    # -----------------------------------------------------------------------
    # API key dependency
    # -----------------------------------------------------------------------
    api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)

    def require_api_key(x_api_key: Optional[str] = Depends(api_key_header)) -> None:
        """Validate the ``x-api-key`` header against ``DXCL_API_KEY``."""
        if api_key and x_api_key != api_key:
            raise HTTPException(status_code=401, detail="Missing or invalid API key")

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.get("/api")
    def api_root():
        """Return a simple service descriptor for programmatic clients."""
        return {
            "ok": True,
            "service": "dxclparser",
            "docs": "/docs",
            "health": "/health",
            "mcp": "/mcp",
        }

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"ok": True}

    @app.post(
        "/api/spots/parse",
        operation_id="parse_spot",
        tags=["Spots"],
        dependencies=[Depends(require_api_key)],
    )
    def rest_parse_spot(body: ParseRequest) -> JSONResponse:
        """Parse one line of DX Cluster traffic.

        The line is cleaned from surrounding whitespace and bell
        characters first.  Returns the record tagged with its spot type
        (DX, WWV, WCY, WX, ToAll or ToLocal) or a 422 error describing
        why the line was rejected.
        """
        raw = clean_line(body.raw)
        try:
            spot = parse(raw)
        except ParseError as e:
            raise _unprocessable(e, raw) from e
        return JSONResponse({"record": spot.to_dict()})

    @app.post(
        "/api/spots/batch",
        operation_id="parse_spots",
        tags=["Spots"],
        dependencies=[Depends(require_api_key)],
    )
    def rest_parse_spots(body: BatchParseRequest) -> JSONResponse:
        """Parse several lines of DX Cluster traffic.

        Blank lines are skipped.  Every other line yields one result
        holding either the tagged record or the error.
        """
        results = [
            {
                "line_no": item.line_no,
                "record": item.spot.to_dict() if item.spot else None,
                "error": _error_detail(item.error) if item.error else None,
            }
            for item in parse_lines(body.lines)
        ]
        parsed = sum(1 for r in results if r["error"] is None)
        return JSONResponse(
            {
                "count": len(results),
                "parsed": parsed,
                "failed": len(results) - parsed,
                "results": results,
            }
        )

    @app.post(
        "/api/rbn/parse",
        operation_id="parse_rbn",
        tags=["RBN"],
        dependencies=[Depends(require_api_key)],
    )
    def rest_parse_rbn(body: ParseRequest) -> JSONResponse:
        """Parse the comment section of a Reverse Beacon Network spot.

        Example input: ``"CW     9 dB  21 WPM  NCDXF B"``.
        """
        raw = body.raw.strip()
        try:
            rbn = parse_rbn(raw)
        except ParseError as e:
            raise _unprocessable(e, raw) from e
        return JSONResponse({"record": rbn.model_dump()})

    # -----------------------------------------------------------------------
    # MCP server mount
    # -----------------------------------------------------------------------
    mcp = FastApiMCP(
        app,
        include_operations=["parse_spot", "parse_spots", "parse_rbn"],
    )
    mcp.mount_http()

    return app


# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = create_app()
