# File: backend/command_hooks/core/execution/__init__.py
# Purpose: Hook command execution
from command_hooks.core.execution.results import ExecutionResult
from command_hooks.core.execution.shell import run_command, run_commands, truncate_text

__all__ = [
    "ExecutionResult",
    "run_command",
    "run_commands",
    "truncate_text",
]
