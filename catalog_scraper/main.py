"""
Main application entry point.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_scraper import __version__
from catalog_scraper.config import config
from catalog_scraper.errors import (
    InvalidProductURLError,
    InvalidResolutionError,
    TransportError,
    UpstreamBlockedError,
    UpstreamRateLimitedError,
    UpstreamUnreachableError,
)
from catalog_scraper.health import router as health_router
from catalog_scraper.logger import logger
from catalog_scraper.normalizers.images import validate_resolution
from catalog_scraper.normalizers.pricing import resolve_sale_price
from catalog_scraper.normalizers.variants import extract_variants
from catalog_scraper.sentry import initialize_sentry
from catalog_scraper.services.fetcher import page_fetcher
from catalog_scraper.services.scraper import scrape_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting catalog scraper")
    initialize_sentry()
    await page_fetcher.initialize()

    yield

    logger.info("Shutting down catalog scraper")
    await page_fetcher.close()

app = FastAPI(
    title="Catalog Scraper API",
    description="Extracts and normalizes product records from store product pages",
    version=__version__,
    lifespan=lifespan
)
app.include_router(health_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def transport_error_response(error: TransportError) -> JSONResponse:
    """Map a fetch failure to the status and message the catalog UI shows."""
    if isinstance(error, UpstreamUnreachableError):
        return _error(503, "Unable to connect to the website. Please try again later.")
    if isinstance(error, UpstreamRateLimitedError):
        return _error(429, "Too many requests. Please wait before trying again.")
    if isinstance(error, UpstreamBlockedError):
        return _error(403, "Access denied. The website may be blocking requests.")
    return _error(500, "Failed to scrape product data. Please try again.")


async def _read_json(request: Request) -> dict:
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _error(404, "Route not found")
    return _error(exc.status_code, str(exc.detail))


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Catalog Scraper",
        "version": __version__,
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.post("/api/scrape-product")
async def scrape_product(request: Request):
    """Scrape one product page into a normalized product record."""
    data = await _read_json(request)
    url = data.get("url")
    resolution = data.get("resolution") or config.IMAGE_RESOLUTION

    logger.info(f"Received scraping request for: {url}")

    try:
        resolution = validate_resolution(resolution)
        product = await scrape_service.scrape_product(url, resolution)
        return product.to_dict()

    except (InvalidProductURLError, InvalidResolutionError) as e:
        return _error(400, str(e))

    except TransportError as e:
        return transport_error_response(e)

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return _error(500, "Internal server error")


@app.post("/api/catalog-draft")
async def catalog_draft(request: Request):
    """Scrape a product page and price it for a catalog category."""
    data = await _read_json(request)
    url = data.get("url")
    category = (data.get("category") or "").strip().lower()
    resolution = data.get("resolution") or config.IMAGE_RESOLUTION

    try:
        resolution = validate_resolution(resolution)
        draft = await scrape_service.scrape_catalog_draft(url, category, resolution)
        return draft.to_dict()

    except (InvalidProductURLError, ValueError) as e:
        return _error(400, str(e))

    except TransportError as e:
        return transport_error_response(e)

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return _error(500, "Internal server error")


@app.post("/api/variants")
async def variants(request: Request):
    """Infer color and storage from a product name."""
    data = await _read_json(request)
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return _error(400, "Product name is required")
    return extract_variants(name).to_dict()


@app.get("/api/price-slab/{mrp}")
async def price_slab(mrp: int):
    """Sale price the catalog lists a product at for a given MRP."""
    if mrp < 0:
        return _error(400, "MRP must not be negative")
    sale_price, slab_resolved = resolve_sale_price(mrp)
    return {"mrp": mrp, "salePrice": sale_price, "slabResolved": slab_resolved}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
