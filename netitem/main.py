"""Application bootstrap — 로깅, 테이블, 코덱, InventoryService 초기화"""

from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from netitem.config import settings
from netitem.core.item.codec import get_extension_codec
from netitem.core.logging import get_logger, setup_logging
from netitem.db.models import Base
from netitem.services.inventory_service import InventoryService

logger = get_logger(__name__)


def bootstrap(db_engine: Optional[Engine] = None) -> InventoryService:
    """InventoryService 인스턴스 반환.

    db_engine 미지정 시 settings.DATABASE_URL 엔진 사용.
    세션은 호출자 소유. 다 쓰면 service.close() 호출.
    """
    setup_logging(settings.LOG_LEVEL)

    if db_engine is None:
        from netitem.db.database import SessionLocal, engine

        db_engine, session_factory = engine, SessionLocal
    else:
        session_factory = sessionmaker(
            bind=db_engine, autocommit=False, autoflush=False
        )

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=db_engine)

    codec = get_extension_codec()
    logger.info("Extension codec initialized: %s", codec.name)

    return InventoryService(db=session_factory(), codec=codec)
