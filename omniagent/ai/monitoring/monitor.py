"""
AI Monitor - structured logs and in-memory metrics for NLU calls.

Every intent parse produces at most one provider round-trip; the monitor
records it as JSON log lines and keeps running totals for /agent/stats.

Usage:
    from omniagent.ai.monitoring import ai_monitor

    ai_monitor.track_request(request_id, prompt=text, provider="openai", model="gpt-4o-mini")
    ai_monitor.track_response_from_ai_response(request_id, response)
    ai_monitor.track_intent(request_id, text, action="create_meet", source="ai")

    stats = ai_monitor.get_stats().to_dict()
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict

from omniagent.ai.providers.base import AIResponse
from omniagent.core.config import settings


# ---------------------------------------------------------------------------
# LOGGING SETUP
# ---------------------------------------------------------------------------
# One console handler on the package root; every "omniagent.*" logger
# propagates to it.
root_logger = logging.getLogger("omniagent")
root_logger.setLevel(settings.LOG_LEVEL.upper())

if not root_logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

logger = logging.getLogger("omniagent.ai")


# ---------------------------------------------------------------------------
# METRICS DATA CLASSES
# ---------------------------------------------------------------------------
@dataclass
class RequestMetrics:
    """Metrics for a single provider call."""
    request_id: str
    provider: str
    model: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    latency_ms: float
    success: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    estimated_cost: float = 0.0


@dataclass
class AggregatedMetrics:
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    fallback_parses: int = 0
    total_tokens: int = 0
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_latency_ms: float = 0.0
    estimated_total_cost: float = 0.0
    requests_by_provider: Dict[str, int] = field(default_factory=dict)
    intents_by_action: Dict[str, int] = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_latency_ms / self.total_requests

    @property
    def success_rate(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return (self.successful_requests / self.total_requests) * 100

    def to_dict(self) -> Dict:
        return {
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "failed_requests": self.failed_requests,
            "fallback_parses": self.fallback_parses,
            "success_rate": f"{self.success_rate:.1f}%",
            "total_tokens": self.total_tokens,
            "prompt_tokens": self.total_prompt_tokens,
            "completion_tokens": self.total_completion_tokens,
            "avg_latency_ms": round(self.avg_latency_ms, 2),
            "estimated_total_cost": f"${self.estimated_total_cost:.4f}",
            "requests_by_provider": dict(self.requests_by_provider),
            "intents_by_action": dict(self.intents_by_action),
        }


# ---------------------------------------------------------------------------
# AI MONITOR
# ---------------------------------------------------------------------------
class AIMonitor:
    """
    Logging + metrics for the NLU pipeline.

    Cost Model (USD per 1M tokens):
    - gpt-4o-mini: ~$0.15 input, ~$0.60 output
    - Gemini Flash: ~$0.30 input, ~$2.50 output
    """

    COST_PER_1M_TOKENS = {
        "openai": {"input": 0.15, "output": 0.60},
        "gemini": {"input": 0.30, "output": 2.50},
    }

    def __init__(self):
        self._logger = logger
        self._lock = Lock()
        self._aggregated = AggregatedMetrics()

    # -----------------------------------------------------------------------
    # TRACKING METHODS
    # -----------------------------------------------------------------------

    def track_request(self, request_id: str, prompt: str, provider: str, model: str) -> None:
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "provider": provider,
            "model": model,
            "prompt_length": len(prompt),
            "prompt_preview": prompt[:100] + "..." if len(prompt) > 100 else prompt,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def track_response_from_ai_response(self, request_id: str, response: AIResponse) -> None:
        provider = response.provider.value
        cost = self._estimate_cost(provider, response.usage.prompt_tokens, response.usage.completion_tokens)

        metrics = RequestMetrics(
            request_id=request_id,
            provider=provider,
            model=response.model,
            prompt_tokens=response.usage.prompt_tokens,
            completion_tokens=response.usage.completion_tokens,
            total_tokens=response.usage.total_tokens,
            latency_ms=response.latency_ms,
            success=response.success,
            estimated_cost=cost,
        )

        with self._lock:
            self._update_aggregated(metrics)

        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "provider": provider,
            "model": response.model,
            "success": response.success,
            "latency_ms": round(response.latency_ms, 2),
            "tokens": {
                "prompt": metrics.prompt_tokens,
                "completion": metrics.completion_tokens,
                "total": metrics.total_tokens,
            },
            "estimated_cost": f"${cost:.6f}",
            "response_length": len(response.content) if response.content else 0,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if response.error:
            log_data["error"] = response.error

        level = logging.INFO if response.success else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def track_intent(
        self,
        request_id: str,
        original_text: str,
        action: str,
        source: str,
        processing_time_ms: float = 0.0,
    ) -> None:
        with self._lock:
            counts = self._aggregated.intents_by_action
            counts[action] = counts.get(action, 0) + 1

        log_data = {
            "event": "intent_parsed",
            "request_id": request_id,
            "action": action,
            "source": source,
            "processing_time_ms": round(processing_time_ms, 2),
            "original_text": original_text[:50] + "..." if len(original_text) > 50 else original_text,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._logger.info(f"Intent Parsed: {json.dumps(log_data)}")

    def track_fallback(self, request_id: str, reason: str) -> None:
        """The AI path failed and the keyword parser took over."""
        with self._lock:
            self._aggregated.fallback_parses += 1

        log_data = {
            "event": "intent_fallback",
            "request_id": request_id,
            "reason": reason[:200],
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._logger.warning(f"Intent Fallback: {json.dumps(log_data)}")

    # -----------------------------------------------------------------------
    # METRICS METHODS
    # -----------------------------------------------------------------------

    def get_stats(self) -> AggregatedMetrics:
        with self._lock:
            return self._aggregated

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._aggregated = AggregatedMetrics()

    # -----------------------------------------------------------------------
    # PRIVATE METHODS
    # -----------------------------------------------------------------------

    def _estimate_cost(self, provider: str, prompt_tokens: int, completion_tokens: int) -> float:
        costs = self.COST_PER_1M_TOKENS.get(provider.lower(), {"input": 0, "output": 0})
        return (prompt_tokens / 1_000_000) * costs["input"] + (completion_tokens / 1_000_000) * costs["output"]

    def _update_aggregated(self, metrics: RequestMetrics) -> None:
        agg = self._aggregated
        agg.total_requests += 1
        if metrics.success:
            agg.successful_requests += 1
        else:
            agg.failed_requests += 1

        agg.total_tokens += metrics.total_tokens
        agg.total_prompt_tokens += metrics.prompt_tokens
        agg.total_completion_tokens += metrics.completion_tokens
        agg.total_latency_ms += metrics.latency_ms
        agg.estimated_total_cost += metrics.estimated_cost
        agg.requests_by_provider[metrics.provider] = agg.requests_by_provider.get(metrics.provider, 0) + 1


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_monitor = AIMonitor()
