"""
Database engine configuration.

This module handles database engine creation and table setup
using SQLAlchemy with async support.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
)

# Create declarative base for models
Base = declarative_base()


async def init_models(bind: AsyncEngine = engine) -> None:
    """
    Create all tables registered on Base.

    Existing tables are left untouched; this is not a migration tool.
    """
    # Import models to ensure they are registered with Base
    from tracker.app.models.parcel import Parcel  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
