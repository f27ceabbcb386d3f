from pydantic import BaseModel

class VehicleStatsResponse(BaseModel):
    total_vehicles: int
    expiring_soon: int
    expired: int
