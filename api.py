"""
REST API for the cube solver demo.

Routes:
- POST /api/cube/configuration   store a painted cube
- GET  /api/cube/configuration/{id}
- POST /api/cube/solve           mock solve, stored when a configurationId is given
- GET  /api/cube/solution/{id}
- GET  /api/cube/random          54 random slots, no validity guarantee

Errors are returned as {"error": message}.
"""

import logging
import random
import sys
from typing import Optional, Union

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

import solver
from config import Settings, get_settings
from cube import random_configuration
from schemas import (
    ConfigurationCreate,
    ConfigurationRecord,
    RandomConfigurationResponse,
    SolutionData,
    SolutionRecord,
    SolveRequest,
    SolveResponse,
)
from storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cube")


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("/configuration", response_model=ConfigurationRecord)
def create_configuration(body: ConfigurationCreate, storage: MemStorage = Depends(get_storage)):
    try:
        return storage.create_configuration(body.configuration, name=body.name)
    except Exception as e:
        logger.exception("Failed to store configuration")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/configuration/{config_id}", response_model=ConfigurationRecord)
def get_configuration(config_id: str, storage: MemStorage = Depends(get_storage)):
    record = storage.get_configuration(config_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Configuration not found")
    return record


@router.post("/solve", response_model=Union[SolutionRecord, SolveResponse])
def solve_cube(
    body: SolveRequest,
    storage: MemStorage = Depends(get_storage),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_app_settings),
):
    try:
        configuration = body.configuration.model_dump()
        result = solver.timed_solve(configuration, rng, retry_rejected=settings.SOLVER_RETRY_REJECTED)
        solution = SolutionData(
            moves=result.moves, total_moves=result.total_moves, solving_time=result.solving_time
        )
        logger.info("Solved cube in %d moves (%.6fs)", result.total_moves, result.solving_time)

        if body.configuration_id:
            return storage.create_solution(solution, configuration_id=body.configuration_id)
        return SolveResponse(solution=solution)
    except Exception as e:
        logger.exception("Solve failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/solution/{solution_id}", response_model=SolutionRecord)
def get_solution(solution_id: str, storage: MemStorage = Depends(get_storage)):
    record = storage.get_solution(solution_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Solution not found")
    return record


@router.get("/random", response_model=RandomConfigurationResponse)
def random_cube(rng: random.Random = Depends(get_rng)):
    return {"configuration": random_configuration(rng)}


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors
    ) or "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[MemStorage] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="Paint a cube face by face and get a (mock) solving sequence.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else MemStorage()
    app.state.rng = rng or random.Random(settings.RANDOM_SEED)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to the {settings.APP_NAME} API"}

    return app


app = create_app()
