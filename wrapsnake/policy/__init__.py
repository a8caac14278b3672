"""Autopilot policies for headless play."""

from wrapsnake.policy.greedy import GreedyPolicy

__all__ = ["GreedyPolicy"]
