"""FastAPI dependency utilities."""

from functools import lru_cache

from fastapi import Depends

from notifier.application.context import PipelineContext, build_pipeline_context
from notifier.application.dispatcher import TriggerDispatcher


@lru_cache
def get_pipeline_context() -> PipelineContext:
    """Return the process-wide pipeline wired from the settings."""

    return build_pipeline_context()


def get_dispatcher(
    context: PipelineContext = Depends(get_pipeline_context),
) -> TriggerDispatcher:
    return TriggerDispatcher(context)

