"""
Data models for maintenance mode requests and responses.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Action(str, Enum):
    """Maintenance actions, in dispatch precedence order."""

    ENABLE = "enable"
    DISABLE = "disable"
    DISABLE_ALL = "disable_all"
    GET_STATUS = "get_status"


class StatusFilter(str, Enum):
    """Status values accepted by the host status query."""

    ACTIVE = "active"
    COMPLETED = "completed"
    SCHEDULED = "scheduled"
    DELETED = "deleted"


class Settings(BaseModel):
    """Connection settings loaded from the JSON config file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(default="", alias="BaseURL")
    api_key: str = Field(default="", alias="API-KEY")
    owner: str = Field(default="", alias="Owners")


class TimeWindow(BaseModel):
    """Start and end of a maintenance window as RFC 3339 strings."""

    start_time: str
    end_time: str


class MaintenanceRequest(BaseModel):
    """Payload sent to create a host maintenance."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    hosts: List[str]
    apply_to_all_services: bool = Field(default=True, alias="allservices")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    owners: List[str]
    comment: str
    ticket_number: int = Field(default=0, alias="rpd")


class MaintenanceRecord(BaseModel):
    """A maintenance as reported by the host status query."""

    model_config = ConfigDict(populate_by_name=True)

    maintenance_id: str = Field(default="", alias="maintenanceId")
    name: str = ""
    type: str = ""
    hosts: List[str] = Field(default_factory=list)
    apply_to_all_services: bool = Field(default=False, alias="allServices")
    start_time: str = Field(default="", alias="startTime")
    end_time: str = Field(default="", alias="endTime")
    created_by: str = Field(default="", alias="createdBy")
    creation_time: str = Field(default="", alias="creationTime")
    updated_by: str = Field(default="", alias="updatedBy")
    updation_time: str = Field(default="", alias="updationTime")
    status: str = ""
    comment: str = ""
    ticket_number: int = Field(default=0, alias="rpd")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        """Treat JSON null as an absent field."""
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v


class MaintenanceOptions(BaseModel):
    """Operator input for a single maintenance action."""

    host: str = ""
    timeout: float = 1.0
    rpd: int = 0
    maintenance_id: Optional[str] = None
    status: str = StatusFilter.ACTIVE.value
    output_format: str = "text"
