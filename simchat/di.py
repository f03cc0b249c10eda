import locale
import logging
import random
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends

from .config import Settings, get_settings
from .logging_config import configure_logging
from .orchestrator import ChatOrchestrator
from .selector import ResponseSelector

logger = logging.getLogger(__name__)


def app_settings() -> Settings:
    return get_settings()


# Only cache pure functions with hashable args
@lru_cache(maxsize=None)
def _shared_selector(seed: int | None) -> ResponseSelector:
    return ResponseSelector(rng=random.Random(seed))


def response_selector(
    settings: Settings = Depends(app_settings),
) -> ResponseSelector:
    return _shared_selector(settings.random_seed)


def orchestrator(
    selector: ResponseSelector = Depends(response_selector),
) -> ChatOrchestrator:
    return ChatOrchestrator(selector)


def use_host_locale() -> None:
    # date/time replies render with the host's default locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Could not apply host locale for LC_TIME: %s", exc)


@asynccontextmanager
async def lifespan(app):
    settings = get_settings()
    configure_logging(settings.service_name, settings.log_level)
    use_host_locale()
    logger.info("simchat starting (env=%s)", settings.app_env)
    try:
        yield
    finally:
        logger.info("simchat shutting down")
