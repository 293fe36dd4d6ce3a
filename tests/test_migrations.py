from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from core.database import Base, engine

ROOT = Path(__file__).resolve().parents[1]

TABLES = {"projects", "project_media", "admin_session"}


def _alembic_config() -> Config:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    return cfg


def test_upgrade_builds_schema_and_downgrade_removes_it():
    Base.metadata.drop_all(bind=engine)
    cfg = _alembic_config()

    command.upgrade(cfg, "head")

    inspector = inspect(engine)
    assert TABLES <= set(inspector.get_table_names())
    (fk,) = inspector.get_foreign_keys("project_media")
    assert fk["referred_table"] == "projects"
    assert fk["options"].get("ondelete") == "CASCADE"

    command.downgrade(cfg, "base")

    assert not TABLES & set(inspect(engine).get_table_names())
