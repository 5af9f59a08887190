"""
Outcome of executing a single command line through the shell.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CommandResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str = Field("", description="The raw command line that was executed")
    success: bool = Field(..., description="True if the command completed without error")
    result: Optional[Any] = Field(
        None, description="Value the command stored in cmd2's last_result"
    )
    error: Optional[str] = Field(None, description="Short description of the failure")

    @classmethod
    def ok(cls, command: str, result: Any = None) -> "CommandResult":
        return cls(command=command, success=True, result=result)

    @classmethod
    def failed(cls, command: str, error: str) -> "CommandResult":
        return cls(command=command, success=False, error=error)
