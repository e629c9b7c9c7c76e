import uvicorn

from aftermarket_api.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    # Single worker: fixtures are in-memory and latency is simulated with
    # asyncio.sleep, so one event loop serves concurrent requests.
    uvicorn.run(
        "aftermarket_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        workers=1,
    )
