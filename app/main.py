from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.routes import tienda, jabon
from app.database import engine, Base, get_db
from app.services.exceptions import TiendaNotFoundError
import os
import logging
from sqlalchemy import text
from sqlalchemy.orm import Session

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import Tienda, Jabon

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Step 1: Initialize DB models/tables
# Only create tables automatically in dev, not production
if os.getenv("ENV", "production") != "production":
    logger.info("Development mode: creating tables if they don't exist")
    Base.metadata.create_all(bind=engine)

# Step 2: Initialize FastAPI app
app = FastAPI(
    title="Jabones Inventory Backend",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configure logging to show API requests
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("fastapi").setLevel(logging.INFO)

# Cross-origin requests are accepted from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

@app.exception_handler(TiendaNotFoundError)
async def tienda_not_found_handler(request: Request, exc: TiendaNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

# Step 3: Include routes
app.include_router(tienda.router)
app.include_router(jabon.router)

@app.get("/health")
def health(db: Session = Depends(get_db)):
    """Health check endpoint for Docker health checks"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": "disconnected", "error": str(e)}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )
