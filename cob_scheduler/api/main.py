"""
FastAPI application for the COB runner scheduler.

Provides REST API endpoints for:
- Generating monthly schedules
- Downloading stored schedules as Excel workbooks
- Retrieving stored schedules as JSON or an HTML table
"""

from typing import List, Dict, Optional
import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..assignment.engine import ScheduleEngine
from ..assignment.models import InternalError, InvalidInputError
from ..config import Settings, get_settings
from ..export.html import render_schedule_table
from ..export.workbook import XLSX_MEDIA_TYPE, workbook_filename, write_workbook
from ..storage import ScheduleNotFoundError, ScheduleStore

logger = logging.getLogger(__name__)


# Pydantic models for API
class ScheduleRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: int
    year: int
    employees: List[str]
    holidays: Optional[List[str]] = None  # ISO date strings
    num_assignees: Optional[int] = Field(default=None, alias="numAssignees")


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schedule: Dict[str, List[str]]
    workload_balance: Dict[str, int] = Field(alias="workloadBalance")


class HealthResponse(BaseModel):
    status: str
    version: str


# Initialize FastAPI app
app = FastAPI(
    title="COB Runner Scheduler API",
    description="API for generating and exporting monthly COB runner schedules",
    version=__version__
)


def get_store(settings: Settings = Depends(get_settings)) -> ScheduleStore:
    return ScheduleStore(settings.schedules_dir)


def get_engine() -> ScheduleEngine:
    return ScheduleEngine()


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        problems.append(f"{field}: {error.get('msg')}")
    return _message(400, "Invalid input: " + "; ".join(problems))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _message(400, str(exc))


@app.exception_handler(ScheduleNotFoundError)
async def schedule_not_found_handler(request: Request, exc: ScheduleNotFoundError):
    return _message(404, "Schedule not found. Please generate it first.")


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    logger.error("Schedule generation error: %s", exc, exc_info=exc)
    return _message(500, "Internal server error.")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return _message(500, "Internal server error.")


@app.get("/", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/generate-schedule", response_model=ScheduleResponse)
def generate_schedule(request: ScheduleRequest,
                      settings: Settings = Depends(get_settings),
                      store: ScheduleStore = Depends(get_store),
                      engine: ScheduleEngine = Depends(get_engine)):
    """
    Generate the COB schedule for a month.

    The schedule is also saved so it can be downloaded later, unless
    persistence is switched off.
    """
    num_assignees = request.num_assignees
    if num_assignees is None:
        num_assignees = settings.default_num_assignees

    schedule = engine.generate(
        month=request.month,
        year=request.year,
        roster=request.employees,
        extra_holidays=request.holidays,
        num_assignees=num_assignees,
    )

    if settings.persist_schedules:
        try:
            store.save(schedule)
        except OSError as exc:
            raise InternalError(f"Could not save schedule: {exc}") from exc

    return ScheduleResponse(
        schedule=schedule.to_dict(),
        workload_balance=schedule.workload_balance,
    )


@app.get("/api/download-schedule")
def download_schedule(month: Optional[int] = Query(None),
                      year: Optional[int] = Query(None),
                      store: ScheduleStore = Depends(get_store)):
    """
    Download a stored schedule as an Excel workbook.
    """
    if month is None or year is None:
        return _message(400, "Month and year are required.")

    schedule = store.load(year, month)
    content = write_workbook(schedule)

    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{workbook_filename(year, month)}"'}
    )


@app.get("/api/schedules/{year}/{month}")
def get_schedule(year: int, month: int, store: ScheduleStore = Depends(get_store)):
    """
    Get a stored schedule as the date -> assignees mapping.
    """
    return {"schedule": store.load(year, month).to_dict()}


@app.get("/api/schedules/{year}/{month}/table", response_class=HTMLResponse)
def get_schedule_table(year: int, month: int, store: ScheduleStore = Depends(get_store)):
    """
    Get a stored schedule rendered as an HTML table.
    """
    return HTMLResponse(render_schedule_table(store.load(year, month)))


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
