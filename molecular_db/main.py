from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from molecular_db.api.v1.router import api_router
from molecular_db.core.config import settings
from molecular_db.core.server_info import set_server_start_time, get_server_uptime
from molecular_db.middleware.request_logging_middleware import RequestLoggingMiddleware
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.utils.helpers import logger

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

# Read-only registry shared by all request handlers (see core.dependencies.get_catalog)
app.state.catalog = DatabaseCatalog.default()

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Welcome to the Molecular Database Integration API", "status": "active"}

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "molecular-db",
        "uptime": get_server_uptime(),
        "catalog_size": len(app.state.catalog),
    }

@app.on_event("startup")
async def startup_event():
    """Record start time and report the loaded catalog"""
    set_server_start_time()
    logger.info(f"{settings.PROJECT_NAME} v{settings.VERSION} started with {len(app.state.catalog)} databases")
    if not settings.SIMULATE_LATENCY:
        logger.info("Simulated source latency is disabled")

def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run("molecular_db.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)

if __name__ == "__main__":
    run()
