import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.config import settings
from core.exceptions import FeeCalculationError
from api.routes import currency, fees

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Ticketing fee service {settings.APP_VERSION} starting")
    yield
    logger.info("Ticketing fee service stopped")


app = FastAPI(title="Ticketing Fees", version=settings.APP_VERSION, lifespan=lifespan)

# Налаштування CORS (щоб фронтенд мав доступ)
origins = [o.strip() for o in settings.FRONTEND_ORIGIN.split(",") if o.strip()] or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FeeCalculationError)
async def fee_calculation_error_handler(request: Request, exc: FeeCalculationError):
    # Фронтенд очікує {"error": "..."}, а не {"detail": ...}
    return JSONResponse(status_code=400, content={"error": str(exc)})


# --- ПІДКЛЮЧЕННЯ РОУТЕРІВ ---
app.include_router(fees.router, prefix="/api", tags=["Fees"])
app.include_router(currency.router, prefix="/api/currency", tags=["Currency"])


@app.get("/")
def read_root():
    return {"status": "ok", "version": settings.APP_VERSION}
