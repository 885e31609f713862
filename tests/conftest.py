from datetime import timedelta

from dotenv import load_dotenv
from fake_clock import FakeClock
from pytest import fixture

from ottmint.services import OneTimeTokenService
from ottmint.settings import Settings
from ottmint.stores import InMemoryCacheStore

# Load all env variables.
load_dotenv()


@fixture
def clock() -> FakeClock:
    return FakeClock()


@fixture
def memory_store(clock: FakeClock) -> InMemoryCacheStore:
    return InMemoryCacheStore(clock=clock.monotonic)


@fixture
def redirect_settings() -> Settings:
    return Settings(
        expiration=timedelta(minutes=5),
        grace_period=timedelta(seconds=5),
    )


@fixture
def token_service(
    memory_store: InMemoryCacheStore,
    redirect_settings: Settings,
    clock: FakeClock,
) -> OneTimeTokenService:
    """Create a one-time token service backed by an in-memory store."""
    return OneTimeTokenService(
        cache_store=memory_store,
        settings=redirect_settings,
        clock=clock.millis,
    )
