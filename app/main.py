from contextlib import asynccontextmanager
import datetime as dt
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db, init_db
from app.schemas import (
    AppSettings,
    DailyPlan,
    HistoryEntry,
    HistoryItem,
    LogRoutineRequest,
    Product,
    ProductCreate,
    ShelfItem,
    ThemeUpdate,
)
from app.services.tracker import EmptySelectionError, SkinCycleService, UnknownProductError
import logging

# Set up logging
settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    await init_db()
    logger.info(f"SkinCycle ready | Database: {settings.database_url}")
    yield


app = FastAPI(title="SkinCycle", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
service = SkinCycleService()


@app.get("/")
async def health_check():
    return {"status": "healthy", "service": "SkinCycle"}


@app.get("/api/today", response_model=DailyPlan)
async def today_plan(on: Optional[dt.date] = None, db: AsyncSession = Depends(get_db)):
    return await service.today_plan(db, today=on)


@app.post("/api/routine/log", response_model=HistoryEntry, status_code=201)
async def log_routine(payload: LogRoutineRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await service.log_routine(db, payload.product_ids)
    except EmptySelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/products", response_model=list[ShelfItem])
async def list_products(on: Optional[dt.date] = None, db: AsyncSession = Depends(get_db)):
    return await service.shelf(db, today=on)


@app.post("/api/products", response_model=Product, status_code=201)
async def add_product(payload: ProductCreate, db: AsyncSession = Depends(get_db)):
    return await service.add_product(db, payload)


@app.delete("/api/products/{product_id}", status_code=204)
async def delete_product(product_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await service.delete_product(db, product_id)
    except UnknownProductError:
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=204)


@app.get("/api/history", response_model=list[HistoryItem])
async def list_history(on: Optional[dt.date] = None, db: AsyncSession = Depends(get_db)):
    return await service.history(db, today=on)


@app.delete("/api/history", status_code=204)
async def clear_history(db: AsyncSession = Depends(get_db)):
    await service.clear_history(db)
    return Response(status_code=204)


@app.get("/api/settings", response_model=AppSettings)
async def get_app_settings(db: AsyncSession = Depends(get_db)):
    return await service.settings(db)


@app.put("/api/settings/theme", response_model=AppSettings)
async def set_theme(payload: ThemeUpdate, db: AsyncSession = Depends(get_db)):
    return await service.set_theme(db, payload.is_dark_theme)
