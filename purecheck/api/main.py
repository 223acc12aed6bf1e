# purecheck/api/main.py
"""
PureCheck API
Ingredient risk analysis, concern filtering and the ingredient wiki
"""

from fastapi import FastAPI, Depends, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import time

from ..core.config import Settings, get_settings, settings
from ..core.exceptions import PureCheckException, global_error_handler, http_status_for
from ..engine.analyzer import IngredientAnalyzer, get_analyzer
from ..engine.filters import apply_filters
from ..observability import analysis_logger, metrics_collector, get_logger
from ..rules.reference_database import ReferenceDatabase, get_reference_database
from ..schemas.domain_models import AnalysisReport, FilterCriteria

logger = get_logger("api")


# ============================================================================
# Dependencies
# ============================================================================

_analyzer: Optional[IngredientAnalyzer] = None


def get_database() -> ReferenceDatabase:
    return get_reference_database()


def get_ingredient_analyzer() -> IngredientAnalyzer:
    """Analyzer for the configured backend, built on first use"""
    global _analyzer
    if _analyzer is None:
        _analyzer = get_analyzer(database=get_reference_database())
    return _analyzer


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting {settings.app_name} API v{settings.app_version}",
        analyzer_backend=settings.analyzer_backend
    )
    database = get_reference_database()
    logger.info("Reference database ready", records=len(database), categories=len(database.categories()))
    yield
    logger.info(f"Shutting down {settings.app_name} API")


# ============================================================================
# FastAPI App Configuration
# ============================================================================

app = FastAPI(
    title="PureCheck API",
    description="Cosmetic ingredient toxicology risk analysis",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def observe_requests(request: Request, call_next):
    """Request logging and Prometheus metrics"""
    start_time = time.time()
    response = await call_next(request)
    elapsed = time.time() - start_time

    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    metrics_collector.record_api_request(request.method, endpoint, response.status_code, elapsed)
    analysis_logger.log_api_request(request.method, request.url.path, response.status_code, elapsed * 1000)
    return response


# ============================================================================
# Request/Response Models
# ============================================================================

class AnalyzeRequest(BaseModel):
    """Ingredient text to analyze"""
    text: str = Field(..., max_length=20000, description="Comma- or line-delimited ingredient list")
    filters: List[str] = Field(default_factory=list, description="pregnancy, pcos, acne, sensitive")

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "Aqua, Methylparaben, BPA, Niacinamide",
                "filters": ["pregnancy"]
            }
        }
    }


class AnalyzeResponse(BaseModel):
    report: Dict[str, Any]
    filters: List[str]
    filtered: List[Dict[str, Any]]


class FilterRequest(BaseModel):
    """Re-filter a report the client already holds"""
    report: AnalysisReport
    filters: List[str] = Field(default_factory=list)


class FilterResponse(BaseModel):
    filters: List[str]
    count: int
    ingredients: List[Dict[str, Any]]


class IngredientSearchResponse(BaseModel):
    count: int
    ingredients: List[Dict[str, Any]]


# ============================================================================
# API Endpoints
# ============================================================================

@app.get("/", tags=["Health"])
async def root():
    """Root endpoint"""
    return {
        "service": f"{settings.app_name} API",
        "version": settings.app_version,
        "status": "running",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health", tags=["Health"])
async def health_check(
    database: ReferenceDatabase = Depends(get_database),
    app_settings: Settings = Depends(get_settings)
):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "analyzer_backend": app_settings.analyzer_backend,
        "reference_records": len(database),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/metrics", tags=["Monitoring"])
async def get_metrics():
    """Prometheus metrics"""
    return Response(
        content=metrics_collector.get_metrics(),
        media_type="text/plain; version=0.0.4"
    )


@app.post("/analyze", response_model=AnalyzeResponse, tags=["Analysis"])
async def analyze(
    request: AnalyzeRequest,
    analyzer: IngredientAnalyzer = Depends(get_ingredient_analyzer)
):
    """
    Analyze an ingredient list

    Returns the full report and the ingredient list after the requested
    filters (the full list when no filter is active).
    """
    report = await analyzer.analyze(request.text)
    criteria = FilterCriteria.from_tokens(request.filters)
    return AnalyzeResponse(
        report=report.to_json_dict(),
        filters=list(criteria.to_tokens()),
        filtered=[record.to_json_dict() for record in apply_filters(report, criteria)]
    )


@app.post("/filter", response_model=FilterResponse, tags=["Analysis"])
async def filter_report(request: FilterRequest):
    """Apply concern filters to an existing report"""
    criteria = FilterCriteria.from_tokens(request.filters)
    records = apply_filters(request.report, criteria)
    return FilterResponse(
        filters=list(criteria.to_tokens()),
        count=len(records),
        ingredients=[record.to_json_dict() for record in records]
    )


@app.get("/ingredients", response_model=IngredientSearchResponse, tags=["Wiki"])
async def search_ingredients(
    q: str = Query("", max_length=200, description="Substring of name or category"),
    category: Optional[str] = Query(None, description="Exact category, or 'All'"),
    database: ReferenceDatabase = Depends(get_database)
):
    """Browse the reference database"""
    records = database.search(q, category)
    return IngredientSearchResponse(
        count=len(records),
        ingredients=[record.to_json_dict() for record in records]
    )


@app.get("/ingredients/categories", tags=["Wiki"])
async def list_categories(database: ReferenceDatabase = Depends(get_database)):
    """Distinct reference categories"""
    return {"categories": ["All"] + database.categories()}


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(PureCheckException)
async def purecheck_exception_handler(request: Request, exc: PureCheckException):
    """Domain errors with their error code and user-facing message"""
    status_code = http_status_for(exc)
    logger.error(
        f"Request failed: {exc.message}",
        path=request.url.path,
        error_code=exc.error_code.value,
        status_code=status_code
    )
    return JSONResponse(status_code=status_code, content=global_error_handler(exc))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Unexpected errors"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=global_error_handler(exc)
    )


def run():
    """Serve with uvicorn"""
    import uvicorn

    uvicorn.run(
        "purecheck.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
