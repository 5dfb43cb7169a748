from contextlib import asynccontextmanager
import logging

from jobmatch.ai.config import load_ai_config
from jobmatch.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    ai_config = load_ai_config(settings)
    app.state.ai_config = ai_config
    app.state.completion_client = None

    logger.info(
        "startup environment=%s provider=%s model=%s",
        settings.environment,
        ai_config.provider,
        ai_config.model,
    )
    if not ai_config.api_key:
        logger.warning("startup_warning OPENAI_API_KEY is not set")

    yield

    client = getattr(app.state, "completion_client", None)
    close = getattr(client, "aclose", None)
    if close is not None:
        await close()
