# init_db.py
import logging
from app.database import engine, Base
# Registers the tables on Base.metadata
from app.db.models import Tienda, Jabon

logger = logging.getLogger(__name__)

def init():
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created: %s", ", ".join(Base.metadata.tables))

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
