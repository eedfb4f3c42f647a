import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from sharecare.core.config import settings
from sharecare.core.dependencies import otp_service
from sharecare.core.logging_config import setup_logging
from sharecare.routers import phone_verification
from sharecare.services.scheduler import SchedulerService

setup_logging()
logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler_service = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    global scheduler_service

    logger.info("Starting up the application...")

    if settings.OTP_SWEEP_ENABLED:
        scheduler_service = SchedulerService(otp_service, settings.OTP_SWEEP_INTERVAL_MINUTES)
        scheduler_service.start()
    else:
        logger.info("OTP sweep disabled, scheduler not started")

    yield

    logger.info("Shutting down the application...")
    if scheduler_service:
        scheduler_service.stop()
        scheduler_service = None

app = FastAPI(
    title="ShareCare API",
    description="Phone verification service for the ShareCare donation platform",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(phone_verification.router)

@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "ShareCare API", "version": "1.0.0"}

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "ShareCare API"}

def _require_debug():
    # Job control is only exposed in debug mode
    if not settings.DEBUG:
        raise HTTPException(status_code=404, detail="Not Found")

@app.get("/scheduler/status")
async def scheduler_status():
    """Get scheduler status and jobs."""
    if not scheduler_service:
        return {"status": "not_running", "jobs": []}

    return {
        "status": "running",
        "jobs": scheduler_service.get_jobs()
    }

@app.post("/scheduler/pause/{job_id}")
async def pause_job(job_id: str):
    """Pause a scheduled job."""
    _require_debug()
    if not scheduler_service:
        return {"status": "error", "message": "Scheduler not running"}

    if scheduler_service.pause_job(job_id):
        return {"status": "success", "message": f"Job {job_id} paused"}
    return {"status": "error", "message": f"Failed to pause job {job_id}"}

@app.post("/scheduler/resume/{job_id}")
async def resume_job(job_id: str):
    """Resume a scheduled job."""
    _require_debug()
    if not scheduler_service:
        return {"status": "error", "message": "Scheduler not running"}

    if scheduler_service.resume_job(job_id):
        return {"status": "success", "message": f"Job {job_id} resumed"}
    return {"status": "error", "message": f"Failed to resume job {job_id}"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
