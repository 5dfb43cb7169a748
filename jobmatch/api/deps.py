from __future__ import annotations

from fastapi import Request

from jobmatch.ai.config import load_ai_config
from jobmatch.ai.factory import get_completion_client
from jobmatch.ai.types import CompletionClient
from jobmatch.core.config import settings


def get_llm_client(request: Request) -> CompletionClient:
    """Process-wide completion client, built once from the config set up at startup."""
    state = request.app.state
    client = getattr(state, "completion_client", None)
    if client is None:
        ai_config = getattr(state, "ai_config", None) or load_ai_config(settings)
        client = get_completion_client(ai_config)
        state.completion_client = client
    return client
