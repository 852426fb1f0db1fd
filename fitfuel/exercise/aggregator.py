# -*- coding: utf-8 -*-
"""Training rollups over a date window (completed sessions only)."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..streams import Observable, combine_latest
from ..windows import DateWindow, WindowSource, as_window_stream
from .models import TrainingSession, TrainingStats


def sessions_in_window(sessions: Iterable[TrainingSession], window: DateWindow) -> List[TrainingSession]:
    selected = [s for s in sessions if window.contains(s.scheduled_at)]
    selected.sort(key=lambda s: s.scheduled_at, reverse=True)
    return selected


def summarize_sessions(sessions: Iterable[TrainingSession], window: DateWindow) -> TrainingStats:
    completed = 0
    minutes = 0
    for session in sessions:
        if not session.is_completed or not window.contains(session.scheduled_at):
            continue
        completed += 1
        minutes += int(session.duration_minutes or 0)
    return TrainingStats(completed_sessions=completed, total_minutes=minutes)


def observe_training_stats(
    sessions: Observable[List[TrainingSession]],
    window: Optional[WindowSource] = None,
) -> Observable[TrainingStats]:
    return combine_latest([sessions, as_window_stream(window)], summarize_sessions)
