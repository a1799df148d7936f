from conftest import make_fetcher, run

from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.services.data_provider import (
    FALLBACK_DRAWS,
    GAME_IDS,
    HistoricalDataProvider,
)


def test_scraped_data_is_used(scraped_primitiva):
    provider = HistoricalDataProvider(
        fetcher=make_fetcher({"primitiva": scraped_primitiva}), ttl_seconds=0,
    )
    assert run(provider.get_historical_draws("primitiva")) == scraped_primitiva

    info = provider.cache_info()
    assert info.loaded
    assert info.games["primitiva"].source == "scraped"
    assert info.games["bonoloto"].source == "fallback"


def test_failure_is_isolated_per_game(scraped_primitiva):
    provider = HistoricalDataProvider(
        fetcher=make_fetcher({"primitiva": scraped_primitiva}, failing={"euromillones"}),
        ttl_seconds=0,
    )
    data = run(provider.get_historical_data())

    assert set(data) == set(GAME_IDS)
    assert data["primitiva"] == scraped_primitiva
    assert data["euromillones"] == FALLBACK_DRAWS["euromillones"]


def test_snapshot_is_cached_until_invalidated(scraped_primitiva):
    calls = []
    provider = HistoricalDataProvider(
        fetcher=make_fetcher({"primitiva": scraped_primitiva}, calls=calls),
        ttl_seconds=0,
    )

    async def scenario():
        first = await provider.get_historical_data()
        second = await provider.get_historical_data()
        return first, second

    first, second = run(scenario())
    assert first == second
    assert len(calls) == len(GAME_IDS)

    provider.invalidate()
    assert not provider.cache_info().loaded
    run(provider.get_historical_data())
    assert len(calls) == 2 * len(GAME_IDS)


def test_expired_cache_reloads():
    calls = []
    now = [100.0]
    provider = HistoricalDataProvider(
        fetcher=make_fetcher(calls=calls), ttl_seconds=60, clock=lambda: now[0],
    )

    run(provider.get_historical_data())
    now[0] = 120.0
    run(provider.get_historical_data())
    assert len(calls) == len(GAME_IDS)
    assert provider.cache_info().age_seconds == 20.0

    now[0] = 200.0
    run(provider.get_historical_data())
    assert len(calls) == 2 * len(GAME_IDS)


def test_unknown_game_returns_empty(fallback_provider):
    assert run(fallback_provider.get_historical_draws("quiniela")) == []


def test_refresh_reloads(fallback_provider):
    run(fallback_provider.get_historical_data())
    data = run(fallback_provider.refresh())
    assert data["gordo"] == FALLBACK_DRAWS["gordo"]


def test_caller_edits_do_not_reach_the_cache(fallback_provider):
    draws = run(fallback_provider.get_historical_draws("primitiva"))
    draws.append(HistoricalDraw(numbers=[1, 2, 3, 4, 5, 6], date="2024-03-01"))
    draws.clear()

    data = run(fallback_provider.get_historical_data())
    data["primitiva"].clear()
    del data["bonoloto"]

    assert run(fallback_provider.get_historical_draws("primitiva")) == FALLBACK_DRAWS["primitiva"]
    assert run(fallback_provider.get_historical_draws("bonoloto")) == FALLBACK_DRAWS["bonoloto"]
