"""APScheduler cron jobs that refresh the historical data cache."""

from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from loguru import logger

from spanish_lottery.services.data_provider import HistoricalDataProvider

_scheduler: AsyncIOScheduler | None = None
_last_refresh: dict | None = None


async def refresh_cache(provider: HistoricalDataProvider) -> dict:
    """Reload every game's draws and remember how it went."""
    global _last_refresh
    started = datetime.now()
    try:
        await provider.refresh()
    except Exception as e:
        logger.error("Scheduled cache refresh failed: {}", e)
        _last_refresh = {"at": started.isoformat(), "status": "error", "error": str(e)}
    else:
        fallback = [g for g, info in provider.cache_info().games.items() if info.source == "fallback"]
        _last_refresh = {"at": started.isoformat(), "status": "success", "fallback_games": fallback}
    return _last_refresh


def start_scheduler(provider: HistoricalDataProvider):
    """Start the APScheduler with refresh jobs for the draw evenings."""
    global _scheduler
    if _scheduler is not None:
        return

    _scheduler = AsyncIOScheduler()

    # Primitiva, Bonoloto, Euromillones, EuroDreams: Monday to Saturday draws
    _scheduler.add_job(
        refresh_cache, "cron",
        args=[provider],
        day_of_week="mon-sat",
        hour=22, minute=30,
        id="weekday_refresh",
    )

    # El Gordo: Sunday
    _scheduler.add_job(
        refresh_cache, "cron",
        args=[provider],
        day_of_week="sun",
        hour=22, minute=30,
        id="gordo_refresh",
    )

    _scheduler.start()
    logger.info("Refresh scheduler started with {} jobs", len(_scheduler.get_jobs()))


def stop_scheduler():
    global _scheduler
    if _scheduler is None:
        return
    _scheduler.shutdown(wait=False)
    _scheduler = None
    logger.info("Refresh scheduler stopped")


def get_scheduler_status() -> dict:
    """Next refresh runs and the outcome of the last scheduled refresh."""
    jobs = [
        {
            "id": job.id,
            "next_run": str(job.next_run_time) if job.next_run_time else None,
            "trigger": str(job.trigger),
        }
        for job in (_scheduler.get_jobs() if _scheduler else [])
    ]
    return {
        "running": _scheduler is not None,
        "jobs": jobs,
        "last_refresh": _last_refresh,
    }
