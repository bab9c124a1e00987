"""
Process runner for capture collaborators.

Provides abstraction for:
- Awaited commands (selector, screenshot tool, transcoder, notifier, picker)
- Detached commands (the recorder, which outlives the invocation)
- Signalling and locating processes across invocations
"""

from capmenu.runner.base import Runner
from capmenu.runner.local import LocalRunner

__all__ = ["Runner", "LocalRunner"]
