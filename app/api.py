"""HTTP route definitions for the service."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas import (
    CurrentStatusResponse,
    ReceiptResponse,
    RiskAssessmentResponse,
    SensorReadingIn,
    SensorReadingOut,
    SimulationResponse,
)
from datastore.reading_store import InMemoryReadingStore
from services.predictor import PredictionService, build_default_predictor
from services.simulator import SensorDataSimulator
from settings import Settings, get_settings

router = APIRouter()
monitoring = APIRouter(prefix="/monitoring", tags=["monitoring"])


def get_predictor() -> PredictionService:
    return build_default_predictor()


def get_store(predictor: PredictionService = Depends(get_predictor)) -> InMemoryReadingStore:
    if predictor.store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Reading store is not configured.",
        )
    return predictor.store


def get_app_settings() -> Settings:
    return get_settings()


@monitoring.post(
    "/sensor-data",
    response_model=ReceiptResponse,
    summary="Store a single sensor reading.",
)
async def receive_sensor_data(
    reading: SensorReadingIn,
    store: InMemoryReadingStore = Depends(get_store),
) -> ReceiptResponse:
    store.add(reading.to_record(datetime.now(timezone.utc)))
    return ReceiptResponse(detail="Sensor data received successfully")


@monitoring.get(
    "/current-status",
    response_model=CurrentStatusResponse,
    summary="Assess the most recent short window of readings.",
)
async def current_status(
    predictor: PredictionService = Depends(get_predictor),
    settings: Settings = Depends(get_app_settings),
) -> CurrentStatusResponse:
    snapshot = predictor.current_status(settings.status_window_minutes)
    assessment = snapshot.assessment
    return CurrentStatusResponse(
        timestamp=assessment.assessed_at,
        risk_level=assessment.risk_level.name,
        confidence=assessment.confidence,
        location=assessment.location,
        total_readings=snapshot.total_readings,
        active_sensors=snapshot.active_sensors,
        window_minutes=snapshot.window_minutes,
    )


@monitoring.get(
    "/risk-assessment",
    response_model=RiskAssessmentResponse,
    summary="Assess the longer lookback window of readings.",
)
async def risk_assessment(
    predictor: PredictionService = Depends(get_predictor),
    settings: Settings = Depends(get_app_settings),
) -> RiskAssessmentResponse:
    assessment = predictor.assess_recent(settings.assessment_window_minutes)
    return RiskAssessmentResponse.from_assessment(assessment)


@monitoring.get(
    "/sensor-readings/{sensor_id}",
    response_model=List[SensorReadingOut],
    summary="List recent readings for one sensor.",
)
async def sensor_readings(
    sensor_id: str,
    hours: Optional[int] = Query(default=None, gt=0),
    store: InMemoryReadingStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> List[SensorReadingOut]:
    lookback = hours if hours is not None else settings.sensor_history_hours
    since = datetime.now(timezone.utc) - timedelta(hours=lookback)
    readings = store.find_by_sensor_since(sensor_id, since)
    return [SensorReadingOut.from_record(reading) for reading in readings]


@monitoring.post(
    "/predict",
    response_model=RiskAssessmentResponse,
    summary="Assess an explicit batch of readings.",
)
async def predict(
    readings: List[SensorReadingIn],
    predictor: PredictionService = Depends(get_predictor),
) -> RiskAssessmentResponse:
    received_at = datetime.now(timezone.utc)
    assessment = predictor.predict([reading.to_record(received_at) for reading in readings])
    return RiskAssessmentResponse.from_assessment(assessment)


@monitoring.post(
    "/simulate",
    response_model=SimulationResponse,
    summary="Generate and store simulated sensor rounds.",
)
async def simulate(
    count: int = Query(default=1, gt=0, le=100),
    store: InMemoryReadingStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SimulationResponse:
    simulator = SensorDataSimulator(
        sensor_count=settings.simulator_sensor_count,
        high_risk_rate=settings.simulator_high_risk_rate,
    )
    stored = 0
    for _ in range(count):
        stored += store.add_many(simulator.generate_round())
    return SimulationResponse(stored=stored)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}


router.include_router(monitoring)
