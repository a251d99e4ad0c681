"""Minimal FastAPI application for regex-based alignment.

This module exposes the alignment pipeline over HTTP so that editors
without a Python runtime can align a block by posting its lines.

Usage (from project root, after installing fastapi and uvicorn):

    uvicorn regex_align.api.app:app --reload

Then POST a JSON body such as
``{"lines": ["a=1", "bb=22"], "pattern": "="}`` to /api/align.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config.config_manager import ConfigurationManager
from ..config.models import ConfigurationError
from ..engine.aligner import BlockAligner
from ..models.document import split_lines
from ..models.enums import EndOfLine
from ..pipeline import AlignmentPipeline
from ..serialization import BlockSerializer


logger = logging.getLogger(__name__)

app = FastAPI(title="Regex Align API", version="0.1.0")


class AlignRequest(BaseModel):
    """Body of an alignment request; give either ``lines`` or ``text``."""

    pattern: str = Field(..., description="Regular expression or template name")
    lines: Optional[List[str]] = None
    text: Optional[str] = None
    start_line: int = Field(0, ge=0)
    eol: str = Field("LF", description="LF, CRLF or CR")
    gutter: Optional[int] = Field(None, ge=0)
    tab_size: Optional[int] = Field(None, ge=1)
    include_parts: bool = False


def _get_config_dir_from_env() -> Optional[str]:
    """Directory holding settings.json, from REGEX_ALIGN_CONFIG_DIR."""
    value = os.getenv("REGEX_ALIGN_CONFIG_DIR")
    if value is None or not value.strip():
        return None
    return value.strip()


def _build_pipeline() -> AlignmentPipeline:
    manager = ConfigurationManager()
    config_dir = _get_config_dir_from_env()
    if config_dir:
        try:
            manager.load_from_directory(config_dir)
        except ConfigurationError as e:
            logger.error(f"Ignoring invalid settings in {config_dir}: {e.message}")
    return AlignmentPipeline(config_manager=manager)


_pipeline = _build_pipeline()


def get_pipeline() -> AlignmentPipeline:
    return _pipeline


def set_pipeline(pipeline: AlignmentPipeline) -> None:
    """Swap the pipeline used by the endpoints, e.g. after reloading settings."""
    global _pipeline
    _pipeline = pipeline


@app.post("/api/align")
async def align(request: AlignRequest) -> JSONResponse:
    """Align a block of lines and return the rendered result.

    Returns HTTP 422 with the error payload when the pattern does not
    compile, and HTTP 400 when neither lines nor text is given.
    """
    try:
        eol = EndOfLine.coerce(request.eol)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown eol {request.eol!r}") from exc

    if request.lines is not None:
        lines = request.lines
    elif request.text is not None:
        lines = split_lines(request.text, eol.sequence)
    else:
        raise HTTPException(status_code=400, detail="Either 'lines' or 'text' is required")

    pipeline = get_pipeline()
    configuration = pipeline.config_manager.configuration
    aligner = BlockAligner(
        gutter=request.gutter if request.gutter is not None else configuration.gutter,
        tab_size=request.tab_size if request.tab_size is not None else configuration.tab_size,
    )

    result = pipeline.process(
        lines,
        request.pattern,
        start_line=request.start_line,
        eol=eol,
        aligner=aligner,
    )
    if not result.success:
        raise HTTPException(status_code=422, detail=result.metadata["error"])
    block = result.block

    payload = {
        "lines": block.rendered_lines(),
        "text": block.text(),
        "columns": block.column_count,
    }
    if request.include_parts:
        payload["block"] = BlockSerializer.to_dict(block)
    return JSONResponse(status_code=200, content=payload)


@app.get("/api/templates")
async def list_templates() -> JSONResponse:
    """List the configured templates."""
    templates = get_pipeline().config_manager.templates
    return JSONResponse(status_code=200, content={"templates": templates.to_dict()})


@app.get("/api/stats")
async def stats() -> JSONResponse:
    """Execution statistics of the shared pipeline."""
    return JSONResponse(status_code=200, content=get_pipeline().get_stats())
