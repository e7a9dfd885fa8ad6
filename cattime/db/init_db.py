# cattime/db/init_db.py
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from cattime.core.config import settings
from cattime.core.security import get_password_hash
from cattime.db import models

logger = logging.getLogger(__name__)

def init_db(engine: Engine, db: Session) -> None:
    """Creates missing tables and, if configured, the first admin account."""
    models.Base.metadata.create_all(bind=engine)

    if not settings.FIRST_ADMIN_EMAIL or not settings.FIRST_ADMIN_PASSWORD:
        return

    if db.query(models.Employee).filter(models.Employee.email == settings.FIRST_ADMIN_EMAIL).first():
        return

    admin = models.Employee(
        email=settings.FIRST_ADMIN_EMAIL,
        full_name="Administrator",
        hashed_password=get_password_hash(settings.FIRST_ADMIN_PASSWORD),
        role="admin",
        company_id=settings.FIRST_ADMIN_COMPANY_ID,
    )
    db.add(admin)
    db.commit()
    logger.info("Created first admin %s", settings.FIRST_ADMIN_EMAIL)
