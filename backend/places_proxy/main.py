import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from places_proxy.core.config import settings
from places_proxy.core.logger import logs
from places_proxy.routes.places_route import router as places_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    logs.log(logging.INFO, f"Server running on port {settings.PORT}")
    logs.log(logging.INFO, f"API Key: {'Present' if settings.GOOGLE_MAPS_API_KEY else 'Missing'}")
    yield

app = FastAPI(title="Community Resource Proxy", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(places_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Community Resource Proxy",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "places": "/api/places?lat=&lng=&keyword=&radius=",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Community Resource Proxy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("places_proxy.main:app", host=settings.HOST, port=settings.PORT, reload=True)
