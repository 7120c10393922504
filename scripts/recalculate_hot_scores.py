#!/usr/bin/env python3
"""Recalculate cached hot scores.

Usage:
    python scripts/recalculate_hot_scores.py            # every thread
    python scripts/recalculate_hot_scores.py <thread>   # one thread
"""

import asyncio
import sys

import logfire

from reputation.application.usecase.hot_score import (
    RecalculateHotScoreRequest,
    RecalculateHotScoreUseCase,
)
from reputation.config import Settings
from reputation.util.di.container import create_container
from reputation.util.logging import setup_logging
from reputation.util.observability import configure_logfire


async def recalculate(thread_id: str | None) -> int:
    """Run one recalculation inside a request scope (one transaction)."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(RecalculateHotScoreUseCase)
            response = await use_case.execute(
                RecalculateHotScoreRequest(thread_id=thread_id)
            )
    finally:
        await container.close()

    logfire.info(
        "Hot score recalculation finished",
        refreshed=response.refreshed,
        hot_score=response.hot_score,
    )
    return response.refreshed


def main() -> int:
    """Recalculate hot scores and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    thread_id = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        asyncio.run(recalculate(thread_id))
        return 0

    except Exception as e:
        logfire.error(
            "Hot score recalculation failed",
            thread_id=thread_id,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
