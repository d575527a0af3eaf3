# File: backend/command_hooks/core/execution/results.py
# Purpose: Immutable result record for a single hook command
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ExecutionResult(BaseModel):
    """
    Outcome of one shell command run on behalf of a hook.

    Two shapes exist:
    - the command ran: exit_code, stdout and stderr are set and
      success == (exit_code == 0)
    - the command could not be run at all: success is False, error holds
      the reason and exit_code/stdout/stderr are None
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    hook_id: str = Field(..., description="Hook the command belongs to")
    success: bool
    exit_code: Optional[int] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_shape(self) -> "ExecutionResult":
        if self.error is not None:
            if self.success:
                raise ValueError("a result with an error cannot be successful")
            if self.exit_code is not None or self.stdout is not None or self.stderr is not None:
                raise ValueError("a result with an error has no exit_code, stdout or stderr")
            return self
        if self.exit_code is None or self.stdout is None or self.stderr is None:
            raise ValueError("exit_code, stdout and stderr are required when no error is set")
        if self.success != (self.exit_code == 0):
            raise ValueError(f"success={self.success} does not match exit_code={self.exit_code}")
        return self

    @classmethod
    def completed(cls, hook_id: str, exit_code: int, stdout: str, stderr: str) -> "ExecutionResult":
        return cls(
            hook_id=hook_id,
            success=exit_code == 0,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )

    @classmethod
    def failed(cls, hook_id: str, error: str) -> "ExecutionResult":
        return cls(hook_id=hook_id, success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape for the hook framework: camelCase keys, absent fields omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)
