"""Cleanup engine."""

from titletotags.engine.cleanup import CleanupEngine, plan_cleanup

__all__ = ["CleanupEngine", "plan_cleanup"]
