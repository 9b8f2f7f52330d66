"""
FastAPI Application Entry Point
Main application setup, HTML pages and route registration
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from cueclub.config import settings
from cueclub.database import connect_db, disconnect_db
from cueclub.services.admin_service import admin_service
from cueclub.services.availability import TIME_SLOTS, TABLES, booking_dates
from cueclub.services.club_service import club_service
from cueclub.services.links import whatsapp_url
from cueclub.services.media_service import gallery_service, slideshow_service
from cueclub.services.pricing_service import pricing_service
from cueclub.services.redis_service import close_redis_connection
from cueclub.services.tournament_service import tournament_service

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

API_PREFIXES = ("/api/", "/auth/", "/admin/")


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Prevent browser from caching HTML pages"""
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        ct = response.headers.get("content-type", "")
        if "text/html" in ct:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the database for the lifetime of the app"""
    await connect_db()
    logger.info("%s started in %s mode", settings.APP_NAME, settings.APP_ENV)

    yield

    await close_redis_connection()
    await disconnect_db()
    logger.info("%s shut down", settings.APP_NAME)


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Snooker club website with table booking and admin back-office",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# No-cache middleware for HTML pages
app.add_middleware(NoCacheMiddleware)

# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# Mount static files
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    """JSON for API calls, a friendly page for browsers"""
    accept = request.headers.get("accept", "")
    if "application/json" in accept or request.url.path.startswith(API_PREFIXES):
        detail = getattr(exc, "detail", None) or "Not Found"
        return JSONResponse(status_code=404, content={"detail": detail})
    return templates.TemplateResponse(
        "404.html",
        {"request": request, "app_name": settings.APP_NAME},
        status_code=404
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong. Please try again."}
    )


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": "1.0.0"
    }


# HTML Page Routes
@app.get("/", response_class=HTMLResponse)
async def home_page(request: Request):
    """Club home page: hero, location, booking, tournaments, pricing, gallery, contact"""
    club = await club_service.get_settings()
    return templates.TemplateResponse(
        "index.html",
        {
            "request": request,
            "app_name": settings.APP_NAME,
            "club": club,
            "whatsapp_link": club["whatsapp_url"] if club else whatsapp_url(None),
            "slides": await slideshow_service.list_active_slides(),
            "pricing": await pricing_service.list_active_plans(),
            "tournaments": await tournament_service.list_active_tournaments(),
            "gallery": await gallery_service.list_images(),
            "booking_dates": booking_dates(days=settings.BOOKING_WINDOW_DAYS),
            "time_slots": TIME_SLOTS,
            "tables": TABLES,
        }
    )


@app.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request):
    """Admin shell; panels load through the JSON API once signed in"""
    return templates.TemplateResponse(
        "admin.html",
        {"request": request, "app_name": settings.APP_NAME, "time_slots": TIME_SLOTS, "tables": TABLES}
    )


@app.get("/admin-setup", response_class=HTMLResponse)
async def admin_setup_page(request: Request):
    """One-time first admin setup page"""
    return templates.TemplateResponse(
        "admin_setup.html",
        {
            "request": request,
            "app_name": settings.APP_NAME,
            "admin_exists": await admin_service.admin_exists()
        }
    )


# Import and include routers
from cueclub.routes import auth, admin, public  # noqa: E402

app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(admin.router, prefix="/admin", tags=["Club Admin"])
app.include_router(public.router, prefix="/api", tags=["Public"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "cueclub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True  # Auto-reload on code changes
    )
