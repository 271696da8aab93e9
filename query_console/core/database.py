from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from query_console.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=False)

# Sessions keep loaded values after commit so results can be read once the
# statement is done
AsyncSessionLocal = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False
)
