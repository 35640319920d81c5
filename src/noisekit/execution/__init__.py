"""Task execution against the subprocess boundary."""

from noisekit.execution.process import run_command
from noisekit.execution.runner import TaskRunner

__all__ = ["TaskRunner", "run_command"]
