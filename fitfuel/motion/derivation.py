# -*- coding: utf-8 -*-
"""
运动状态推导

Derives MotionState from raw sensor samples:
- daily steps from a cumulative counter and a baseline
- activity level from the latest accelerometer magnitude
- a debounced shake pulse that clears itself after a fixed delay
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from ..config import settings
from ..errors import InvalidInput, SensorUnavailable
from ..streams import (
    Cancellable,
    Observable,
    Scheduler,
    SharedStream,
    Subject,
    Subscription,
    default_scheduler,
)
from .models import AccelerometerSample, ActivityLevel, MotionState
from .sensors import SensorSource, availability_of

logger = logging.getLogger(__name__)

# Lower edges (m/s^2) of LIGHT, MODERATE and VIGOROUS.
ACTIVITY_BOUNDARIES = np.array([10.0, 13.0, 16.0])
_LEVELS = (
    ActivityLevel.SEDENTARY,
    ActivityLevel.LIGHT,
    ActivityLevel.MODERATE,
    ActivityLevel.VIGOROUS,
)


def acceleration_magnitude(x: float, y: float, z: float) -> float:
    return float(np.linalg.norm(np.array([x, y, z], dtype=float)))


def classify_activity(magnitude: float) -> ActivityLevel:
    return _LEVELS[int(np.digitize(magnitude, ACTIVITY_BOUNDARIES))]


class StepTracker:
    """Daily steps as the cumulative count minus a baseline."""

    def __init__(self) -> None:
        self.baseline: Optional[int] = None
        self.daily_steps = 0
        self.last_cumulative: Optional[int] = None

    def update(self, cumulative: int) -> int:
        self.last_cumulative = cumulative
        if self.baseline is None:
            self.baseline = cumulative
        self.daily_steps = max(0, cumulative - self.baseline)
        return self.daily_steps

    def reset_daily(self) -> None:
        # Fold today's count into the baseline; the next sample counts from here.
        self.baseline = self.daily_steps + (self.baseline or 0)
        self.daily_steps = 0

    def set_baseline(self, baseline: int) -> int:
        if isinstance(baseline, bool) or not isinstance(baseline, int) or baseline < 0:
            raise InvalidInput("baseline", f"expected a non-negative integer, got {baseline!r}")
        self.baseline = baseline
        if self.last_cumulative is not None:
            self.daily_steps = max(0, self.last_cumulative - baseline)
        return self.daily_steps


class ShakeDetector:
    def __init__(self, threshold: float, debounce_ms: int) -> None:
        self.threshold = threshold
        self.debounce_ms = debounce_ms
        self.last_shake_ms: Optional[int] = None

    def offer(self, magnitude: float, timestamp_ms: int) -> bool:
        """True when this sample fires a shake."""
        if magnitude <= self.threshold:
            return False
        if self.last_shake_ms is not None and timestamp_ms - self.last_shake_ms < self.debounce_ms:
            return False
        self.last_shake_ms = timestamp_ms
        return True


class MotionDerivationUnit:
    """
    运动推导单元

    Sensors are only listened to while someone observes the state. The step
    baseline survives between observation sessions, like a device-level
    counter would.
    """

    def __init__(
        self,
        sensors: Optional[SensorSource],
        *,
        scheduler: Optional[Scheduler] = None,
        shake_threshold: Optional[float] = None,
        shake_debounce_ms: Optional[int] = None,
        shake_pulse_ms: Optional[int] = None,
        keep_alive_sec: Optional[float] = None,
    ) -> None:
        self.sensors = sensors
        self.availability = availability_of(sensors)
        self.scheduler: Scheduler = scheduler or default_scheduler
        self.steps = StepTracker()
        self.shake = ShakeDetector(
            settings.shake_threshold if shake_threshold is None else shake_threshold,
            settings.shake_debounce_ms if shake_debounce_ms is None else shake_debounce_ms,
        )
        self.shake_pulse_ms = settings.shake_pulse_ms if shake_pulse_ms is None else shake_pulse_ms

        self._state: Subject[MotionState] = Subject(self._initial_state())
        self._sensor_subscriptions: List[Subscription] = []
        self._pulse_handle: Optional[Cancellable] = None
        self._shared: Optional[SharedStream[MotionState]] = None
        if self.availability.any:
            self._shared = SharedStream(
                _MotionFeed(self),
                keep_alive_sec=keep_alive_sec,
                scheduler=self.scheduler,
                name="motion",
            )

    def _initial_state(self) -> MotionState:
        return MotionState(
            daily_steps=0 if self.availability.has_step_counter else None,
            activity_level=ActivityLevel.SEDENTARY if self.availability.has_accelerometer else None,
            shake_detected=False,
        )

    @property
    def is_running(self) -> bool:
        return bool(self._sensor_subscriptions)

    @property
    def state(self) -> MotionState:
        return self._state.value

    def observe_state(self) -> Optional[Observable[MotionState]]:
        """Live motion state, or None when the device has no motion sensors."""
        return self._shared

    def start(self) -> None:
        if self.is_running or self.sensors is None:
            return
        step_stream = self.sensors.step_counter()
        if step_stream is not None:
            self._sensor_subscriptions.append(step_stream.subscribe(self._on_steps))
        accel_stream = self.sensors.accelerometer()
        if accel_stream is not None:
            self._sensor_subscriptions.append(accel_stream.subscribe(self._on_acceleration))
        logger.info("Motion sensors started (%s)", self.availability.model_dump())

    def stop(self) -> None:
        for subscription in self._sensor_subscriptions:
            subscription.cancel()
        self._sensor_subscriptions = []
        if self._pulse_handle is not None:
            self._pulse_handle.cancel()
            self._pulse_handle = None
        if self._state.value.shake_detected:
            self._update(shake_detected=False)
        logger.info("Motion sensors stopped")

    def reset_daily_steps(self) -> None:
        self._require_step_counter()
        self.steps.reset_daily()
        self._update(daily_steps=0)

    def set_step_baseline(self, baseline: int) -> None:
        self._require_step_counter()
        daily = self.steps.set_baseline(baseline)
        self._update(daily_steps=daily)

    def _require_step_counter(self) -> None:
        if not self.availability.has_step_counter:
            raise SensorUnavailable("step_counter")

    def _update(self, **changes) -> None:
        self._state.emit(self._state.value.model_copy(update=changes))

    def _on_steps(self, cumulative: int) -> None:
        self._update(daily_steps=self.steps.update(int(cumulative)))

    def _on_acceleration(self, sample: AccelerometerSample) -> None:
        magnitude = acceleration_magnitude(sample.x, sample.y, sample.z)
        if not math.isfinite(magnitude):
            logger.warning("Dropping non-finite accelerometer sample at %sms", sample.timestamp_ms)
            return
        changes = {"activity_level": classify_activity(magnitude)}
        fired = self.shake.offer(magnitude, sample.timestamp_ms)
        if fired:
            logger.debug("Shake detected (%.2f m/s^2 at %sms)", magnitude, sample.timestamp_ms)
            changes["shake_detected"] = True
        self._update(**changes)
        if fired:
            self._schedule_pulse_clear()

    def _schedule_pulse_clear(self) -> None:
        if self._pulse_handle is not None:
            self._pulse_handle.cancel()
        self._pulse_handle = self.scheduler.call_later(self.shake_pulse_ms / 1000.0, self._clear_shake)

    def _clear_shake(self) -> None:
        self._pulse_handle = None
        self._update(shake_detected=False)


class _MotionFeed(Observable[MotionState]):
    def __init__(self, unit: MotionDerivationUnit) -> None:
        self._unit = unit

    def subscribe(self, callback) -> Subscription:
        inner = self._unit._state.subscribe(callback)
        self._unit.start()

        def cancel() -> None:
            inner.cancel()
            self._unit.stop()

        return Subscription(cancel)
