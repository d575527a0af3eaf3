# File: backend/command_hooks/core/execution/shell.py
# Purpose: Run hook shell commands one at a time and shape their outcome
"""
Shell command execution for hooks.

- Commands run through `<shell> -c <command>` one after another, even if
  earlier commands fail
- stdout, stderr and the exit code are captured for every command
- Each stream is truncated to a configurable limit (default 30,000 chars)
- Nothing is raised: spawn failures end up in ExecutionResult.error
"""
import subprocess
from typing import Optional, Sequence, Union

import structlog

from command_hooks.config import Settings, get_settings
from command_hooks.core.execution.results import ExecutionResult

logger = structlog.get_logger(__name__)

DEFAULT_TRUNCATE_LIMIT = 30_000
DEFAULT_HOOK_ID = "command"
TRUNCATION_NOTICE = "\n\n[Output truncated: exceeded {limit} character limit]"


def truncate_text(text: Optional[str], limit: int) -> str:
    """Keep the first `limit` characters and append a notice if anything was cut."""
    if limit <= 0:
        raise ValueError(f"truncate limit must be positive, got {limit}")
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_NOTICE.format(limit=limit)


def _execute_shell_command(command: str, shell: str) -> tuple[str, str, int]:
    """
    Spawn `shell -c command` and wait for it to exit.

    Raises whatever subprocess raises when the process cannot be started
    (missing shell, embedded NUL byte, ...). A non-zero exit is not an error.
    """
    proc = subprocess.run(
        [shell, "-c", command],
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    exit_code = proc.returncode if proc.returncode is not None else 0
    return proc.stdout or "", proc.stderr or "", exit_code


def _run_one(command: str, hook_id: str, truncate_limit: int, settings: Settings) -> ExecutionResult:
    if settings.OPENCODE_HOOKS_DEBUG:
        logger.debug("command_start", hook_id=hook_id, command=command)

    try:
        raw_stdout, raw_stderr, exit_code = _execute_shell_command(command, settings.HOOKS_SHELL)
    except Exception as e:
        logger.error(
            "command_failed",
            hook_id=hook_id,
            command=command,
            error=str(e),
            error_type=type(e).__name__,
        )
        return ExecutionResult.failed(hook_id, str(e))

    stdout = truncate_text(raw_stdout, truncate_limit)
    stderr = truncate_text(raw_stderr, truncate_limit)

    if settings.OPENCODE_HOOKS_DEBUG:
        logger.debug(
            "command_completed",
            hook_id=hook_id,
            exit_code=exit_code,
            stdout_length=len(stdout),
            stderr_length=len(stderr),
        )

    return ExecutionResult.completed(hook_id, exit_code, stdout, stderr)


def _resolve_limit(truncate_limit: Optional[int], settings: Settings) -> int:
    limit = settings.HOOKS_TRUNCATE_LIMIT if truncate_limit is None else truncate_limit
    if limit <= 0:
        raise ValueError(f"truncate limit must be positive, got {limit}")
    return limit


def run_command(
    command: str,
    truncate_limit: Optional[int] = None,
    hook_id: str = DEFAULT_HOOK_ID,
) -> ExecutionResult:
    """
    Execute a single shell command.

    Args:
        command: Shell command to execute
        truncate_limit: Max characters kept per stream, defaults to
            HOOKS_TRUNCATE_LIMIT (30,000)
        hook_id: Hook tag for the result; callers running on behalf of a
            hook should pass their own id

    Returns:
        ExecutionResult with output and exit code, or with error set when the
        command could not be started

    Example:
        >>> result = run_command("echo hi")
        >>> result.exit_code, result.stdout
        (0, 'hi\\n')
    """
    return run_commands([command], hook_id, truncate_limit)[0]


def run_commands(
    commands: Union[str, Sequence[str]],
    hook_id: str,
    truncate_limit: Optional[int] = None,
) -> list[ExecutionResult]:
    """
    Execute commands sequentially on behalf of one hook.

    A failing command does not stop the sequence; every command gets its own
    result, all tagged with `hook_id`. Invalid settings or a non-positive
    truncate_limit fail every command with the same error.

    Args:
        commands: A single command string or a list of them
        hook_id: Hook ID included in every result
        truncate_limit: Max characters kept per stream

    Returns:
        One ExecutionResult per command, in input order
    """
    command_list = [commands] if isinstance(commands, str) else list(commands)

    try:
        settings = get_settings()
        limit = _resolve_limit(truncate_limit, settings)
    except Exception as e:
        logger.error(
            "runner_config_invalid",
            hook_id=hook_id,
            error=str(e),
            error_type=type(e).__name__,
        )
        return [ExecutionResult.failed(hook_id, str(e)) for _ in command_list]

    if settings.OPENCODE_HOOKS_DEBUG:
        logger.debug("commands_start", hook_id=hook_id, count=len(command_list))

    return [_run_one(command, hook_id, limit, settings) for command in command_list]
