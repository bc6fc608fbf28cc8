from pydantic import BaseModel
from typing import List

class CommandRequest(BaseModel):
    command: str
    args: List[str] = []

class HealthResponse(BaseModel):
    status: str
    version: str
    agent_url: str
