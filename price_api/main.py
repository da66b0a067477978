from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from price_api.core.config import settings
from price_api.core.errors import PriceLookupError, price_lookup_error_handler
from price_api.routes import price
from price_api.routes.price import get_price_source
from price_api.schemas.price import MessageResponse
from price_api.services.price.sources import PriceSource

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Price lookup API backed by a static table or live CoinGecko quotes",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PriceLookupError, price_lookup_error_handler)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Process Time: {process_time:.4f}s"
    )

    return response


# Include routers
app.include_router(price.router)


@app.on_event("startup")
async def startup_event():
    logger.info(f"Price source: {settings.PRICE_SOURCE}, listening on port {settings.PORT}")


@app.get("/", response_model=MessageResponse)
async def root(source: PriceSource = Depends(get_price_source)):
    return {"message": source.banner}


@app.get("/health")
async def health_check(source: PriceSource = Depends(get_price_source)):
    return {"status": "healthy", "timestamp": time.time(), "price_source": source.name}


def run():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
