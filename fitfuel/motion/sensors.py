# -*- coding: utf-8 -*-
"""
Sensor sources

A SensorSource hands out raw sample streams, or None for a sensor the device
lacks. SimulatedSensors is the in-process source used by tests and demos:
samples are pushed in by the caller instead of read from hardware.
"""

from __future__ import annotations

import time
from typing import Optional, Protocol, Sequence

from ..streams import EventStream, Observable
from .models import AccelerometerSample, SensorAvailability


class SensorSource(Protocol):
    def step_counter(self) -> Optional[Observable[int]]: ...

    def accelerometer(self) -> Optional[Observable[AccelerometerSample]]: ...


def availability_of(sensors: Optional[SensorSource]) -> SensorAvailability:
    if sensors is None:
        return SensorAvailability()
    return SensorAvailability(
        has_step_counter=sensors.step_counter() is not None,
        has_accelerometer=sensors.accelerometer() is not None,
    )


class SimulatedSensors:
    """Push-driven sensor source."""

    def __init__(self, *, has_step_counter: bool = True, has_accelerometer: bool = True) -> None:
        self._steps: Optional[EventStream[int]] = EventStream() if has_step_counter else None
        self._accel: Optional[EventStream[AccelerometerSample]] = EventStream() if has_accelerometer else None

    def step_counter(self) -> Optional[Observable[int]]:
        return self._steps

    def accelerometer(self) -> Optional[Observable[AccelerometerSample]]:
        return self._accel

    @property
    def is_listening(self) -> bool:
        """True while any derivation is subscribed to a sensor."""
        streams = [s for s in (self._steps, self._accel) if s is not None]
        return any(stream.subscriber_count for stream in streams)

    def push_steps(self, cumulative: int) -> None:
        if self._steps is None:
            raise RuntimeError("simulated device has no step counter")
        self._steps.emit(int(cumulative))

    def push_acceleration(self, x: float, y: float, z: float, timestamp_ms: Optional[int] = None) -> None:
        if self._accel is None:
            raise RuntimeError("simulated device has no accelerometer")
        if timestamp_ms is None:
            timestamp_ms = int(time.monotonic() * 1000)
        self._accel.emit(AccelerometerSample(x=x, y=y, z=z, timestamp_ms=timestamp_ms))

    def replay_steps(self, readings: Sequence[int]) -> None:
        for cumulative in readings:
            self.push_steps(cumulative)
