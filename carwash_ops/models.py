"""
Row models for the car wash tables: services, cars, crew_members and
service_packages.

Each table has a row model (what the store returns) and a create model (what a
form submits: no id, no timestamps).
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CarSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class CarStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class SizePricing(BaseModel):
    """Per size-class price table; all four sizes are always present"""
    small: float
    medium: float
    large: float
    extra_large: float

    def for_size(self, size: CarSize) -> float:
        return getattr(self, CarSize(size).value)


class EntityRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Services

class ServiceCreate(BaseModel):
    name: str
    price: float = 0
    description: Optional[str] = None
    pricing: Optional[SizePricing] = Field(
        default_factory=lambda: SizePricing(small=0, medium=0, large=0, extra_large=0)
    )


class Service(EntityRow):
    name: str
    price: float = 0
    description: Optional[str] = None
    pricing: Optional[SizePricing] = None

    def price_for(self, size: CarSize) -> float:
        """Price for a vehicle size, falling back to the base price"""
        if self.pricing is None:
            return self.price
        return self.pricing.for_size(size)


# Cars

class VehicleJobCreate(BaseModel):
    plate: str
    model: str
    phone: str
    size: CarSize = CarSize.MEDIUM
    service: str = ""
    status: CarStatus = CarStatus.PENDING
    crew: Optional[List[str]] = []
    services: Optional[List[str]] = []
    total_cost: Optional[float] = 0


class VehicleJob(EntityRow):
    plate: str
    model: str
    size: CarSize
    service: str
    status: CarStatus
    phone: str
    crew: Optional[List[str]] = None
    services: Optional[List[str]] = None
    total_cost: Optional[float] = None


# Crew

class CrewMemberCreate(BaseModel):
    name: str
    phone: Optional[str] = None
    role: Optional[str] = "worker"
    is_active: Optional[bool] = True


class CrewMember(EntityRow):
    name: str
    phone: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = True


# Packages

class ServicePackageCreate(BaseModel):
    name: str
    description: Optional[str] = None
    service_ids: Optional[List[str]] = []
    # Pricing shape is left open
    pricing: Optional[Dict[str, Any]] = Field(default_factory=dict)
    is_active: Optional[bool] = True


class ServicePackage(EntityRow):
    name: str
    description: Optional[str] = None
    service_ids: Optional[List[str]] = None
    pricing: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None
