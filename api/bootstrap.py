from functools import lru_cache

from api.config import Settings, settings
from focus.core.llm import TextService
from focus.planner.smart_plan import SmartPlanGenerator
from infra.llm.http_text import HttpTextService


def build_text_service(config: Settings = settings) -> TextService:
    """Pick the text-generation backend named by TEXT_SERVICE_BACKEND."""
    backend = (config.text_service_backend or "http").lower()
    if backend == "ollama":
        # Imported lazily: LangChain is only needed for the local backend.
        from infra.llm.ollama import OllamaTextService
        return OllamaTextService(model=config.ollama_model, base_url=config.ollama_base_url)
    if backend == "http":
        return HttpTextService(config.text_service_url, token=config.text_service_token)
    raise ValueError(f"Unknown text service backend: {config.text_service_backend}")


def build_plan_generator(config: Settings = settings) -> SmartPlanGenerator:
    return SmartPlanGenerator(build_text_service(config), timeout=config.smart_plan_timeout_seconds)


@lru_cache(maxsize=1)
def get_plan_generator() -> SmartPlanGenerator:
    """FastAPI dependency; one generator per process."""
    return build_plan_generator()
