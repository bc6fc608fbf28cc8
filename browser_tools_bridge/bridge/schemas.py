from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel, StrictStr

SUCCESS_STATUS = "success"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class ApiResponse(BaseModel):
    """Envelope returned by the BrowserTools agent."""
    status: StrictStr
    data: Any = None
    message: StrictStr = ""

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS


class LaunchCommand(BaseModel):
    command: str
    args: List[str] = []
    env: List[Tuple[str, str]] = []


class ArgumentCompletion(BaseModel):
    label: str
    new_text: str
    run_command: bool = True


class OutputSection(BaseModel):
    start: int
    end: int
    label: str


class SlashCommandOutput(BaseModel):
    text: str
    sections: List[OutputSection] = []

    @classmethod
    def single_section(cls, text: str, label: str) -> "SlashCommandOutput":
        return cls(text=text, sections=[OutputSection(start=0, end=len(text), label=label)])
