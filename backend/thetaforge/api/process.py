"""POST /api/process — full four-stage pipeline over a text document."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from thetaforge.config import settings
from thetaforge.engine.context import PipelineContext
from thetaforge.engine.formatter import (
    context_to_report_text,
    context_to_result,
    context_to_summary,
)
from thetaforge.engine.pipeline import create_pipeline
from thetaforge.engine.processor import build_context
from thetaforge.models.requests import ProcessRequest
from thetaforge.models.responses import ProcessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


_SENTINEL = object()  # marks end of queue


def build_response(ctx: PipelineContext, elapsed_ms: float) -> ProcessResponse:
    return ProcessResponse(
        result=context_to_result(ctx),
        summary=context_to_summary(ctx),
        report_text=context_to_report_text(ctx),
        processing_time_ms=round(elapsed_ms, 1),
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        errors=ctx.errors,
    )


def run_text(text: str, seed: int | None, skip: list[str] | None = None) -> ProcessResponse:
    """Run the pipeline synchronously and wrap the context in a response."""
    start = time.perf_counter()
    ctx = build_context(text, seed=seed if seed is not None else settings.default_seed)
    ctx = create_pipeline().run(ctx, skip=set(skip or ()))
    return build_response(ctx, (time.perf_counter() - start) * 1000)


async def _stream_process(req: ProcessRequest) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()

    seed = req.seed if req.seed is not None else settings.default_seed
    try:
        ctx = build_context(req.text, seed=seed)
        pipeline = create_pipeline()
    except Exception as e:
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        """Sync pipeline in thread — pushes progress dicts onto the async queue."""
        try:
            for progress in pipeline.run_streaming(ctx, skip=set(req.skip)):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    # Start pipeline in a thread so the event loop stays free to flush SSE
    worker = loop.run_in_executor(None, _run_pipeline)

    # Drain the queue, yielding SSE events as they arrive
    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        data = json.dumps(item)
        yield f"event: progress\ndata: {data}\n\n"

    try:
        await worker
    except Exception as e:
        logger.warning("Streaming pipeline failed: %s", e)
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    response = build_response(ctx, (time.perf_counter() - start) * 1000)
    yield f"event: result\ndata: {response.model_dump_json(by_alias=True)}\n\n"

    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/process/stream")
async def process_stream(req: ProcessRequest) -> StreamingResponse:
    return StreamingResponse(
        _stream_process(req),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/process", response_model=ProcessResponse)
async def process(req: ProcessRequest) -> ProcessResponse:
    try:
        return run_text(req.text, req.seed, req.skip)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
