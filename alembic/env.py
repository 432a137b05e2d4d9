import os
import sys
from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context

# Ensure project root is on sys.path so `core` and `models` can be imported
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

# Import DB settings and metadata from the app
from core.config import settings
from models.base import Base

# Import all model modules so Alembic autogenerate can discover tables
from models import user, account, session, project, task, subtask, task_note  # noqa: F401
from models import project_note, schedule, document, meeting, project_return  # noqa: F401
from models import design_requirement, text_content_requirement, video_requirement  # noqa: F401
from models import image_asset, schedule_cell, ui_preference  # noqa: F401
from models import brand, brand_project, creator  # noqa: F401

config = context.config

# Override URL from application settings to avoid duplication
config.set_main_option("sqlalchemy.url", settings.SQLALCHEMY_DATABASE_URI)

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def include_object(object, name, type_, reflected, compare_to):
    # Leave tables that exist only in the database alone
    return not (reflected and compare_to is None)


def _batch_mode(url: str) -> bool:
    # SQLite cannot ALTER most constraints in place
    return url.startswith("sqlite")


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        include_object=include_object,
        render_as_batch=_batch_mode(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            include_object=include_object,
            render_as_batch=_batch_mode(str(connection.engine.url)),
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
