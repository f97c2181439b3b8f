"""
CareFund Risk Planner — FastAPI Application Entry Point

POST /v1/assessment/risk       → health risk score, factors, prevention steps
POST /v1/assessment/financial  → insurance plan, savings, emergency fund
POST /v1/assessment/full       → both stages
GET  /v1/environment           → AQI / weather snapshot for a city
GET  /docs                     → OpenAPI / Swagger UI
"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.assessment_endpoint import router as assessment_router
from app.api.dependencies import get_enricher
from app.api.environment_endpoint import router as environment_router
from app.core.config import get_settings

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer() if get_settings().app_env == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(get_settings().log_level),
)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "carefund_starting",
        env=settings.app_env,
        narrative_enrichment=get_enricher().configured,
        live_aqi=bool(settings.aqicn_api_key),
    )
    yield
    logger.info("carefund_shutting_down")


app = FastAPI(
    title="CareFund Risk Planner",
    description="Personal health-risk scoring and insurance/savings planning",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (web dashboard) ──
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # tighten in production
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)

# ── Prometheus metrics ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# ── Routes ──
app.include_router(assessment_router)
app.include_router(environment_router)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "service": "carefund-risk-planner",
        "version": "1.0.0",
        "docs": "/docs",
        "risk": "POST /v1/assessment/risk",
        "financial": "POST /v1/assessment/financial",
        "full": "POST /v1/assessment/full",
        "environment": "GET /v1/environment?city=",
    }
