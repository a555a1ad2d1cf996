from fastapi import APIRouter

from catalog_scraper.services.fetcher import page_fetcher

router = APIRouter()


@router.get("/api/health")
async def health_check():
    return {"status": "OK", "message": "Product scraper backend is running"}


@router.get("/api/ready")
async def readiness_check():
    return {
        "ready": page_fetcher.is_available,
        "services": {
            "config": True,
            "fetcher": page_fetcher.is_available
        }
    }
