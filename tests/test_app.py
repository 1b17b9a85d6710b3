from __future__ import annotations

import pytest
from flask import Flask
from sqlalchemy import create_engine, text

from artgalerie import create_app, db
from artgalerie.config import TestConfig


class SansCleConfig(TestConfig):
    SECRET_KEY = None


def test_create_app_requires_a_secret_key() -> None:
    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        create_app(SansCleConfig)


def test_foreign_keys_are_enforced_on_the_application_engine(app: Flask) -> None:
    with db.engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_other_sqlite_engines_are_left_alone(app: Flask) -> None:
    engine = create_engine("sqlite://")
    with engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 0
    engine.dispose()
