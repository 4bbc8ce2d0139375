import uvicorn

if __name__ == "__main__":
    # Web frontend; expects the API service at VILLA_API_URL
    uvicorn.run(
        "villa_web.main:app",
        host="0.0.0.0",
        port=8001,
        reload=False,
        log_level="info",
        access_log=True
    )
