# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Phone Directory Service
=======================
Keeps a directory of people and their phone numbers: create a person from
form fields (first name, last name, DDD-DDD-DDDD phone), list everyone, and
show or delete a single person.

Deleting a person is refused while phone numbers still reference it
(restrict-on-delete).

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from phonebook.controllers import person_controller, system_controller
from phonebook.core.config import settings
from phonebook.core.dependencies import get_person_repo, get_person_service
from phonebook.core.logging import get_logger
from phonebook.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    repo = get_person_repo()
    try:
        repo.create_schema()
        if settings.SEED_DATA:
            repo.seed_if_empty()
        get_person_service().seed_gauges()
    except Exception:
        logger.warning("Could not prepare schema, DB may not be ready yet")
    yield
    repo.dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Phone Directory Service",
    description="Stores people and their phone numbers.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(person_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8005, log_level="info")
