# -*- coding: utf-8 -*-
"""Engine error taxonomy.

Storage I/O failures (sqlite3.Error, OSError) are not wrapped here; they reach
the caller unmodified.
"""

from __future__ import annotations

from typing import Optional


class FitFuelError(Exception):
    ...


class InvalidInput(FitFuelError, ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class SensorUnavailable(FitFuelError):
    def __init__(self, sensor: str):
        super().__init__(f"sensor_unavailable:{sensor}")
        self.sensor = sensor


class ProfileExists(FitFuelError):
    ...


class ProfileMissing(FitFuelError):
    ...


class RecordNotFound(FitFuelError):
    def __init__(self, collection: str, record_id: Optional[int]):
        super().__init__(f"{collection} record not found: {record_id}")
        self.collection = collection
        self.record_id = record_id
