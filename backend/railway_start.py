#!/usr/bin/env python3
"""
Railway startup script for the FastAPI backend
"""
import os
import uvicorn

# Import the main app
from sharecare.main import app

# Get port from Railway environment
port = int(os.environ.get("PORT", 8000))

if __name__ == "__main__":
    print(f"🚀 Starting ShareCare API on port {port}")
    print(f"🌍 Environment: {os.environ.get('RAILWAY_ENVIRONMENT', 'development')}")

    # Single worker: pending OTPs live in this process's memory
    uvicorn.run(
        "railway_start:app",
        host="0.0.0.0",
        port=port,
        workers=1,
        log_level="info"
    )
