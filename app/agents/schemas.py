## Pydantic Schemas for requests and structured output
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class RoadmapRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    projectTitle: str
    projectDescription: Optional[str] = None

class RoadmapPhase(BaseModel):
    phase: str
    tasks: List[str]
    status: str = "pending"

class RoadmapResponse(BaseModel):
    roadmap: List[RoadmapPhase]

class ErrorResponse(BaseModel):
    error: str
