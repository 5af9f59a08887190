"""
Canonical result of one shellkit run.

A run ends with exactly one `ExitStatus`; its `code` becomes the process
exit code.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExitStatus(BaseModel):
    """Success flag plus numeric process exit code.

    `code == 0` if and only if `succeeded` is true.
    """

    model_config = ConfigDict(frozen=True)

    succeeded: bool = Field(..., description="True when the run fully succeeded")
    code: int = Field(..., description="Process exit code, 0 on success")

    @model_validator(mode="after")
    def _check_code_matches_outcome(self) -> "ExitStatus":
        if (self.code == 0) != self.succeeded:
            raise ValueError(
                f"exit code {self.code} is inconsistent with succeeded={self.succeeded}"
            )
        return self

    @classmethod
    def from_code(cls, code: int) -> "ExitStatus":
        """Build a status from a bare exit code."""
        return cls(succeeded=code == 0, code=int(code))


NORMAL_EXIT = ExitStatus(succeeded=True, code=0)
FATAL_EXIT = ExitStatus(succeeded=False, code=1)
# argparse convention for malformed arguments
USAGE_EXIT = ExitStatus(succeeded=False, code=2)
INTERRUPTED_EXIT = ExitStatus(succeeded=False, code=130)
