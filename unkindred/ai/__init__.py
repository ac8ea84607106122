"""AI layer: per-tick monster decisions."""

from unkindred.ai.brain import AIBrain, AIDecision, select_state

__all__ = ["AIBrain", "AIDecision", "select_state"]
