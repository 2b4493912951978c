"""
Monitoring Module - observability for the NLU step.

    from omniagent.ai.monitoring import ai_monitor
    stats = ai_monitor.get_stats()
"""

from omniagent.ai.monitoring.monitor import AIMonitor, AggregatedMetrics, ai_monitor

__all__ = [
    "AIMonitor",
    "AggregatedMetrics",
    "ai_monitor",
]
