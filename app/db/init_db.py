import logging
from sqlalchemy.ext.asyncio import AsyncEngine
from app.core.config import settings
from app.core.database import engine as default_engine, async_session_maker
from app.models.base import Base
import app.models  # noqa: F401  registers all tables on Base.metadata

logger = logging.getLogger(__name__)

async def create_tables(engine: AsyncEngine = default_engine):
    """Create all database tables"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        
        logger.info("Database tables created successfully")
        
    except Exception as e:
        logger.error(f"Error creating tables: {str(e)}")
        raise

async def init_db():
    """Initialize the database"""
    logger.info(f"Initializing database for {settings.ENVIRONMENT} environment...")

    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()

    if settings.SEED_SAMPLE_DATA:
        from app.db.seeds.initial_data import create_initial_data
        async with async_session_maker() as session:
            await create_initial_data(session)

    logger.info("Database initialized successfully")
