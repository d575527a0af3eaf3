# File: backend/command_hooks/__init__.py
# Purpose: Shell command runner for hook execution
from command_hooks.core.execution import (
    ExecutionResult,
    run_command,
    run_commands,
    truncate_text,
)

__all__ = [
    "ExecutionResult",
    "run_command",
    "run_commands",
    "truncate_text",
]
