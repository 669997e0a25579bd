from __future__ import annotations

import re
import sqlite3
from datetime import date, timedelta
from typing import Optional

import pytest

from src.employee_directory.container import build_container_for
from src.employee_directory.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.employee_directory.main import create_app

SQLITE_SCHEMA = """
CREATE TABLE employees (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    image TEXT,
    gender TEXT,
    hire_date TEXT NOT NULL,
    mail_address TEXT,
    zip_code TEXT,
    address TEXT,
    telephone TEXT,
    salary INTEGER NOT NULL DEFAULT 0,
    characteristics TEXT,
    dependents_count INTEGER NOT NULL DEFAULT 0
)
"""

NAMES = [
    "Hanako Yamada",
    "Taro Suzuki",
    "Jiro Tanaka",
    "Sakura Ito",
    "Kenji Watanabe",
    "Yuki Nakamura",
    "Hiroshi Kobayashi",
    "Aiko Kato",
    "Daisuke Yoshida",
    "Mei Yamaguchi",
    "Sho Matsumoto",
    "Rina Inoue",
]

BASE_HIRE_DATE = date(2020, 4, 1)


def _like_to_regex(pattern: str, escape: Optional[str]) -> str:
    out: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if escape and ch == escape and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
        i += 1
    return "".join(out)


def _case_sensitive_like(pattern, value, escape=None):
    if pattern is None or value is None:
        return None
    return re.fullmatch(_like_to_regex(pattern, escape), value, re.DOTALL) is not None


class _SQLiteCursor:
    """Adapts a sqlite3 cursor to the mysql-connector surface the repositories use."""

    def __init__(self, raw: sqlite3.Cursor):
        self._raw = raw

    def execute(self, sql: str, params=()):
        self._raw.execute(sql.replace("%s", "?"), tuple(params))

    def fetchone(self):
        row = self._raw.fetchone()
        return dict(row) if row is not None else None

    def fetchall(self):
        return [dict(r) for r in self._raw.fetchall()]

    @property
    def rowcount(self) -> int:
        return self._raw.rowcount

    @property
    def lastrowid(self):
        return self._raw.lastrowid

    def close(self) -> None:
        self._raw.close()


class _SQLiteConnection:
    def __init__(self, raw: sqlite3.Connection):
        self._raw = raw

    def cursor(self, dictionary: bool = False):
        return _SQLiteCursor(self._raw.cursor())

    def commit(self) -> None:
        self._raw.commit()

    def rollback(self) -> None:
        self._raw.rollback()

    def close(self) -> None:
        # The in-memory database lives as long as the factory.
        pass


class SQLiteConnectionFactory:
    """Test stand-in for DatabaseConnection backed by an in-memory sqlite database.

    LIKE is case-insensitive (like a *_ci collation) unless ``case_sensitive=True``.
    """

    def __init__(self, *, case_sensitive: bool = False):
        self._raw = sqlite3.connect(":memory:", check_same_thread=False)
        self._raw.row_factory = sqlite3.Row
        if case_sensitive:
            self._raw.create_function("like", 2, _case_sensitive_like)
            self._raw.create_function("like", 3, _case_sensitive_like)
        self._raw.execute(SQLITE_SCHEMA)
        self.connect_calls = 0

    def connect(self):
        self.connect_calls += 1
        return _SQLiteConnection(self._raw)

    def insert(self, *, id: int, name: str, hire_date: date, dependents_count: int = 0, salary: int = 300000) -> None:
        self._raw.execute(
            """
            INSERT INTO employees
                (id, name, image, gender, hire_date, mail_address, zip_code, address,
                 telephone, salary, characteristics, dependents_count)
            VALUES (?,?,?,?,?,?,?,?,?,?,?,?)
            """,
            (
                id,
                name,
                f"e{id}.png",
                "F" if id % 2 else "M",
                hire_date.isoformat(),
                f"employee{id}@example.com",
                f"100-00{id:02d}",
                f"{id} Chome, Tokyo",
                f"090-0000-{id:04d}",
                salary,
                f"Employee number {id}",
                dependents_count,
            ),
        )
        self._raw.commit()

    def raw_row(self, employee_id: int) -> Optional[dict]:
        cur = self._raw.execute("SELECT * FROM employees WHERE id=?", (employee_id,))
        row = cur.fetchone()
        return dict(row) if row is not None else None


def seed_twelve(factory: SQLiteConnectionFactory) -> None:
    """Employee id k is hired (12 - k) days after BASE_HIRE_DATE, so hire order is the reverse of id order."""
    for employee_id, name in enumerate(NAMES, start=1):
        factory.insert(
            id=employee_id,
            name=name,
            hire_date=BASE_HIRE_DATE + timedelta(days=12 - employee_id),
            dependents_count=employee_id % 3,
        )


@pytest.fixture
def sqlite_db() -> SQLiteConnectionFactory:
    factory = SQLiteConnectionFactory()
    seed_twelve(factory)
    return factory


@pytest.fixture
def empty_db() -> SQLiteConnectionFactory:
    return SQLiteConnectionFactory()


@pytest.fixture
def case_sensitive_db() -> SQLiteConnectionFactory:
    factory = SQLiteConnectionFactory(case_sensitive=True)
    seed_twelve(factory)
    return factory


@pytest.fixture
def employees_repo(sqlite_db) -> MySQLEmployeeRepository:
    return MySQLEmployeeRepository(sqlite_db)


@pytest.fixture
def app(monkeypatch, sqlite_db):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=build_container_for(sqlite_db))


@pytest.fixture
def client(app):
    return app.test_client()
