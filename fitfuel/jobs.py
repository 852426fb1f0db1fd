# -*- coding: utf-8 -*-
"""
Periodic jobs

Named jobs an external scheduler invokes (daily, hourly, weekly). Each job
returns a JobResult; ``run_job`` maps storage failures to ``retry`` so the
scheduler can apply its own retry policy.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel, Field

from .config import settings
from .exercise.aggregator import summarize_sessions
from .nutrition.aggregator import summarize_meals
from .windows import DateWindow, yesterday_window

if TYPE_CHECKING:
    from .engine import FitFuelEngine

logger = logging.getLogger(__name__)

DAILY_REMINDER_TITLE = "FitFuel Daily Reminder"
DAILY_REMINDER_TEXT = "Don't forget to log your meals and workouts for today!"


class JobStatus(str, Enum):
    SUCCESS = "success"
    RETRY = "retry"
    FAILURE = "failure"


class JobResult(BaseModel):
    job: str
    status: JobStatus
    message: str = ""
    detail: Dict[str, Any] = Field(default_factory=dict)


JobFn = Callable[["FitFuelEngine", datetime], Awaitable[JobResult]]


def _percent(value: float, target: float) -> Optional[float]:
    if target <= 0:
        return None
    return round(100.0 * value / target, 1)


async def daily_nutrition_summary(engine: "FitFuelEngine", now: datetime) -> JobResult:
    """Yesterday's intake against the profile targets."""
    window = yesterday_window(now)
    summary = summarize_meals(engine.meals.list_all(), window)
    training = summarize_sessions(engine.sessions.list_all(), window)
    profile = engine.profiles.get()

    detail: Dict[str, Any] = {
        "date": window.start.date().isoformat(),
        "nutrition": summary.model_dump(),
        "training": training.model_dump(),
        "targets": None,
        "calories_pct": None,
    }
    if profile is not None:
        targets = profile.targets()
        detail["targets"] = targets.model_dump()
        detail["calories_pct"] = _percent(summary.calories, targets.calories)

    return JobResult(
        job="daily_nutrition_summary",
        status=JobStatus.SUCCESS,
        message=f"Daily nutrition summary calculated for {detail['date']}",
        detail=detail,
    )


async def training_reminders(engine: "FitFuelEngine", now: datetime) -> JobResult:
    """Incomplete sessions starting within the lookahead."""
    horizon = DateWindow(now, now + timedelta(minutes=settings.reminder_lookahead_min))
    upcoming = [
        session
        for session in engine.sessions.list_all()
        if not session.is_completed and horizon.contains(session.scheduled_at)
    ]
    reminders = [f"Reminder: {session.title} starting soon!" for session in upcoming]
    return JobResult(
        job="training_reminders",
        status=JobStatus.SUCCESS,
        message=f"{len(reminders)} upcoming session(s)",
        detail={
            "reminders": reminders,
            "session_ids": [session.id for session in upcoming],
        },
    )


async def grocery_cleanup(engine: "FitFuelEngine", now: datetime) -> JobResult:
    """Drop purchased grocery items older than the cleanup age."""
    day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    cutoff = day_start - timedelta(days=settings.cleanup_age_days)
    deleted = await engine.groceries.delete_purchased_before(cutoff)
    return JobResult(
        job="grocery_cleanup",
        status=JobStatus.SUCCESS,
        message=f"Cleanup completed: Deleted {deleted} old grocery items",
        detail={"deleted": deleted, "cutoff": cutoff.isoformat()},
    )


async def daily_reminder(engine: "FitFuelEngine", now: datetime) -> JobResult:
    return JobResult(
        job="daily_reminder",
        status=JobStatus.SUCCESS,
        message=DAILY_REMINDER_TEXT,
        detail={"title": DAILY_REMINDER_TITLE},
    )


JOBS: Dict[str, JobFn] = {
    "daily_nutrition_summary": daily_nutrition_summary,
    "training_reminders": training_reminders,
    "grocery_cleanup": grocery_cleanup,
    "daily_reminder": daily_reminder,
}


async def run_job(name: str, engine: "FitFuelEngine", now: Optional[datetime] = None) -> JobResult:
    job = JOBS.get(name)
    if job is None:
        logger.warning("Unknown job requested: %s", name)
        return JobResult(job=name, status=JobStatus.FAILURE, message=f"unknown job: {name}")

    try:
        result = await job(engine, now or datetime.now())
    except (sqlite3.Error, OSError) as exc:
        logger.error("Job %s storage error, asking for retry: %s", name, exc)
        return JobResult(job=name, status=JobStatus.RETRY, message=str(exc))
    except Exception as exc:
        logger.error("Job %s failed: %s", name, exc)
        return JobResult(job=name, status=JobStatus.FAILURE, message=str(exc))

    logger.info("Job %s finished: %s", name, result.message)
    return result
