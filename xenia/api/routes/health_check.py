import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from xenia.domain.base import utc_now
from xenia.depends import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health(session: AsyncSession = Depends(get_session)):
    try:
        await session.execute(text("select 1"))
        database = "ok"
    except Exception as exc:
        logger.error(f"Database ping failed: {exc}")
        database = "unavailable"

    return {
        "ok": True,
        "data": {
            "service": ApplicationConfig.SERVICE_NAME,
            "time": utc_now().isoformat() + "Z",
            "env": ApplicationConfig.ENVIRONMENT,
            "database": database,
        },
    }
