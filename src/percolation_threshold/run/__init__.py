"""Run definition and grid-size sweep orchestration."""

from .config import RunConfig
from .orchestrator import RunOrchestrator

__all__ = ['RunConfig', 'RunOrchestrator']
