"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from models.records import RiskAssessment, SensorReading


class SensorReadingIn(BaseModel):
    """Inbound reading; the server stamps the time when it is omitted."""

    sensor_id: str = Field(..., min_length=1)
    timestamp: Optional[datetime] = None
    vibration: float = Field(..., description="Vibration level in Hz.")
    temperature: float = Field(..., description="Temperature in degrees Celsius.")
    moisture: float = Field(..., description="Moisture content in percent.")
    pressure: float = Field(..., description="Pressure in kPa.")
    location_x: float
    location_y: float

    def to_record(self, received_at: datetime) -> SensorReading:
        stamp = self.timestamp or received_at
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return SensorReading(
            sensor_id=self.sensor_id,
            timestamp=stamp,
            vibration=self.vibration,
            temperature=self.temperature,
            moisture=self.moisture,
            pressure=self.pressure,
            location_x=self.location_x,
            location_y=self.location_y,
        )


class SensorReadingOut(BaseModel):
    sensor_id: str
    timestamp: datetime
    vibration: float
    temperature: float
    moisture: float
    pressure: float
    location_x: float
    location_y: float

    @classmethod
    def from_record(cls, reading: SensorReading) -> "SensorReadingOut":
        return cls(
            sensor_id=reading.sensor_id,
            timestamp=reading.timestamp,
            vibration=reading.vibration,
            temperature=reading.temperature,
            moisture=reading.moisture,
            pressure=reading.pressure,
            location_x=reading.location_x,
            location_y=reading.location_y,
        )


class ReceiptResponse(BaseModel):
    detail: str


class SimulationResponse(BaseModel):
    stored: int = Field(..., ge=0)


class RiskAssessmentResponse(BaseModel):
    """Serialized risk assessment returned to clients."""

    risk_level: str
    risk_description: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    location: str
    assessed_at: datetime
    contributing_factors: List[str] = Field(default_factory=list)

    @classmethod
    def from_assessment(cls, assessment: RiskAssessment) -> "RiskAssessmentResponse":
        return cls(
            risk_level=assessment.risk_level.name,
            risk_description=assessment.risk_level.description,
            confidence=assessment.confidence,
            location=assessment.location,
            assessed_at=assessment.assessed_at,
            contributing_factors=list(assessment.contributing_factors),
        )


class CurrentStatusResponse(BaseModel):
    """Snapshot of the most recent monitoring window."""

    timestamp: datetime
    risk_level: str
    confidence: float
    location: str
    total_readings: int = Field(..., ge=0)
    active_sensors: int = Field(..., ge=0)
    window_minutes: int = Field(..., gt=0)
