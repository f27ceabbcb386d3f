from pydantic import BaseModel
from typing import Dict, List, Optional
from datetime import datetime

class MaintenanceItem(BaseModel):
    mileage: int
    kmage: Optional[int] = None
    months: Optional[int] = None
    services: List[str]
    cost_low: Optional[int] = None
    cost_high: Optional[int] = None
    estimated_cost: Optional[int] = None

class GeneralService(BaseModel):
    interval: str
    description: str

class MaintenanceScheduleResponse(BaseModel):
    schedule_id: int
    make: str
    model: str
    year: int
    driving_condition: str
    schedule: List[MaintenanceItem]
    general_services: Dict[str, GeneralService]
    source: str
    last_updated: datetime

class AvailableMaintenance(BaseModel):
    make: str
    models: List[str]
