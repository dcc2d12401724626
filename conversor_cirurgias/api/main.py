from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uuid
import time
from conversor_cirurgias.api.endpoints import convert
from conversor_cirurgias.common.logging_config import setup_logging, set_request_id, get_logger
from conversor_cirurgias.common.settings import get_settings

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)
logger = get_logger("api.main")

app = FastAPI(title="Conversor de Cirurgias API", version="1.0.0")


# Middleware for Request ID and Logging
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    request_id = str(uuid.uuid4())
    set_request_id(request_id)

    start_time = time.time()

    logger.info(
        f"Request started: {request.method} {request.url.path}",
        extra_fields={
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown"
        }
    )

    try:
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}",
            extra_fields={
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2)
            }
        )

        response.headers["X-Request-ID"] = request_id
        return response
    except Exception as e:
        logger.error(
            f"Request failed: {request.method} {request.url.path}",
            exc_info=True,
            path=request.url.path,
            error_type=type(e).__name__,
            process_time_ms=round((time.time() - start_time) * 1000, 2),
        )
        raise


origins = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173"
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Record-Count", "X-Artifact-Count", "X-Request-ID"],
)

app.include_router(convert.router, prefix="/api/convert", tags=["Convert"])


@app.get("/api/health")
def health_check():
    return {"status": "ok", "app": "Conversor de Cirurgias"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8010)
