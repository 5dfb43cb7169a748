from jobmatch.ai.config import AIConfig
from jobmatch.ai.types import CompletionClient
from jobmatch.core.errors import ConfigurationError

from jobmatch.ai.providers.openai_provider import OpenAIProvider


def get_completion_client(cfg: AIConfig) -> CompletionClient:
    if cfg.provider == "openai":
        return OpenAIProvider(cfg)

    raise ConfigurationError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
