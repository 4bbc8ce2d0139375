import uvicorn

if __name__ == "__main__":
    # Production configuration for the API service
    uvicorn.run(
        "villa_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,
        workers=1,        # Single worker for SQLite
        log_level="info",
        access_log=True
    )
