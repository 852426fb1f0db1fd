# -*- coding: utf-8 -*-
"""Local SQLite store for meals, training sessions, grocery items and the profile."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Path | None = None) -> None:
    """Create the entity tables if they do not exist yet."""
    path = db_path or settings.db_path
    conn = connect(path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS meals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                meal_type TEXT NOT NULL,
                calories INTEGER NOT NULL DEFAULT 0,
                protein_g REAL NOT NULL DEFAULT 0,
                carbs_g REAL NOT NULL DEFAULT 0,
                fat_g REAL NOT NULL DEFAULT 0,
                eaten_at TEXT NOT NULL,
                notes TEXT
            );
            """
        )
        cur.execute("CREATE INDEX IF NOT EXISTS idx_meals_eaten_at ON meals(eaten_at DESC);")
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS training_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                session_type TEXT NOT NULL,
                intensity TEXT NOT NULL,
                duration_minutes INTEGER NOT NULL DEFAULT 0,
                scheduled_at TEXT NOT NULL,
                is_completed INTEGER NOT NULL DEFAULT 0,
                notes TEXT
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_training_sessions_scheduled ON training_sessions(scheduled_at ASC);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS grocery_items (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                quantity TEXT NOT NULL DEFAULT '',
                category TEXT NOT NULL,
                is_purchased INTEGER NOT NULL DEFAULT 0,
                notes TEXT,
                created_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS user_profile (
                name TEXT NOT NULL,
                goal TEXT NOT NULL,
                training_frequency TEXT NOT NULL,
                dietary_preference TEXT NOT NULL,
                weight_kg REAL NOT NULL,
                daily_calorie_target INTEGER NOT NULL,
                daily_protein_target REAL NOT NULL,
                daily_carb_target REAL NOT NULL,
                daily_fat_target REAL NOT NULL,
                onboarding_completed INTEGER NOT NULL DEFAULT 0,
                updated_at TEXT NOT NULL
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path | None = None) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path or settings.db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
