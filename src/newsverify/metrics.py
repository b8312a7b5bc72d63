import time
from typing import Any, Dict


class Metrics:
    """Track service metrics"""

    def __init__(self):
        self.total_requests = 0
        self.successful_requests = 0
        self.failed_requests = 0
        self.cache_hits = 0
        self.heuristic_verdicts = 0
        self.store_errors = 0
        self.total_processing_time = 0.0
        self.start_time = time.time()

    def record_request(self, success: bool, processing_time: float):
        """Record request outcome"""
        self.total_requests += 1
        if success:
            self.successful_requests += 1
        else:
            self.failed_requests += 1
        self.total_processing_time += processing_time

    def record_verdict(self, from_cache: bool):
        if from_cache:
            self.cache_hits += 1
        else:
            self.heuristic_verdicts += 1

    def record_store_error(self):
        self.store_errors += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get current metrics"""
        uptime = time.time() - self.start_time
        avg_time = self.total_processing_time / self.total_requests if self.total_requests > 0 else 0

        return {
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "failed_requests": self.failed_requests,
            "success_rate": f"{(self.successful_requests / self.total_requests * 100):.1f}%" if self.total_requests > 0 else "N/A",
            "cache_hits": self.cache_hits,
            "heuristic_verdicts": self.heuristic_verdicts,
            "store_errors": self.store_errors,
            "average_processing_time": f"{avg_time:.3f}s",
            "uptime_seconds": int(uptime),
        }
