"""
Response Schemas
================

Permissive Pydantic models describing the top-level shape of API responses.
Only the fields the suites rely on are declared; anything else the API
returns is kept as extra data.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Base for every response body model."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ErrorResponse(ApiResponse):
    """Error body returned for 4xx/5xx responses."""

    error: str = Field(..., description="Error message")


class SuccessResponse(ApiResponse):
    """Generic acknowledgement body."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Human readable detail")


class ScheduleObject(ApiResponse):
    id: str = Field(..., description="Schedule identifier")
    type: Optional[str] = Field(None, description="DECLARATIVE or IMPERATIVE")
    task: Optional[str] = Field(None, description="Task the schedule triggers")
    active: Optional[bool] = Field(None, description="Whether the schedule is active")


class ScheduleList(ApiResponse):
    data: List[Any] = Field(..., description="Schedules on this page")
    meta: Optional[Dict[str, Any]] = Field(None, description="Pagination metadata")


class EnvVarList(ApiResponse):
    env_vars: List[Any] = Field(..., alias="envVars", description="Environment variables")


class EnvVarValue(ApiResponse):
    value: str = Field(..., description="Environment variable value")


class TriggerTaskResponse(ApiResponse):
    id: str = Field(..., description="Id of the run created by the trigger")


class RunObject(ApiResponse):
    id: str = Field(..., description="Run identifier")
    status: Optional[str] = Field(None, description="Run status")


class RunList(ApiResponse):
    runs: List[Any] = Field(..., description="Runs on this page")


class RunMetadataResponse(ApiResponse):
    metadata: Dict[str, Any] = Field(..., description="Run metadata after update")


class TimezonesResponse(ApiResponse):
    timezones: List[str] = Field(..., description="IANA timezone names")
