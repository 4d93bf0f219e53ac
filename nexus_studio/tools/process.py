"""External process invoker (git, docker, vercel, netlify, editors)."""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from nexus_studio.domain.exceptions import ToolError
from nexus_studio.infrastructure.logging.logger import logger


@dataclass
class ProcessResult:
    command: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class ProcessRunner:
    """Thin wrapper around subprocess; failures surface as ToolError."""

    timeout: Optional[float] = None

    def exists(self, command: str) -> bool:
        return shutil.which(command) is not None

    def run(
        self,
        cmd: Sequence[str],
        cwd: Optional[str | Path] = None,
        env: Optional[Mapping[str, str]] = None,
        check: bool = True,
    ) -> ProcessResult:
        cmd = [str(c) for c in cmd]
        full_env = {**os.environ, **env} if env else None
        logger.info("process.run", extra={"extra": {"cmd": cmd, "cwd": str(cwd) if cwd else None}})
        try:
            completed = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd else None,
                env=full_env,
                capture_output=True,
                text=True,
                check=check,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise ToolError(code="TOOL_NOT_FOUND", message=f"{cmd[0]} not found", tool=cmd[0]) from exc
        except OSError as exc:
            raise ToolError(code="TOOL_FAILED", message=f"{cmd[0]} could not be started: {exc}", tool=cmd[0]) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise ToolError(
                code="TOOL_FAILED",
                message=f"{cmd[0]} exited with {exc.returncode}: {detail}".rstrip(": "),
                tool=cmd[0],
                returncode=exc.returncode,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ToolError(code="TOOL_TIMEOUT", message=f"{cmd[0]} timed out", tool=cmd[0]) from exc
        return ProcessResult(
            command=cmd,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
