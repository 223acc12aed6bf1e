# purecheck/observability.py
"""
Observability module for JSON logging and metrics collection
Provides structured logging and Prometheus metrics
"""

import json
import logging
import time
import re
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from functools import wraps
from enum import Enum

from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest

from .core.config import settings


# ============================================================================
# Security - Log Masking
# ============================================================================

class LogMasker:
    """Mask sensitive information in logs"""

    API_KEY_PATTERNS = [
        r'(?i)(api[_-]?key|apikey|api[_-]?token)\s*[:=]\s*["\']?([a-zA-Z0-9_\-]{20,})["\']?',
        r'(?i)(bearer\s+)([a-zA-Z0-9_\-\.]{20,})',
        r'(?i)(token\s*[:=]\s*)["\']?([a-zA-Z0-9_\-\.]{20,})["\']?',
    ]

    # Gemini REST URLs may carry the key as a query parameter
    URL_KEY_PATTERN = r'([?&]key=)[^&\s"\']+'

    @classmethod
    def mask_api_keys(cls, text: str) -> str:
        """Mask API keys and tokens"""
        for pattern in cls.API_KEY_PATTERNS:
            text = re.sub(pattern, r'\1=***MASKED***', text)
        text = re.sub(cls.URL_KEY_PATTERN, r'\1***MASKED***', text)
        return text

    @classmethod
    def sanitize_log_data(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Sanitize entire log data dictionary"""
        sanitized = {}

        for key, value in data.items():
            if key.lower() in ('api_key', 'apikey', 'x-goog-api-key', 'token', 'password', 'secret', 'auth'):
                sanitized[key] = '***MASKED***'
                continue

            if isinstance(value, dict):
                sanitized[key] = cls.sanitize_log_data(value)
            elif isinstance(value, str):
                sanitized[key] = cls.mask_api_keys(value)
            else:
                sanitized[key] = value

        return sanitized


# ============================================================================
# JSON Logger Configuration
# ============================================================================

class LogLevel(str, Enum):
    """Log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging with key masking"""

    def __init__(self, enable_masking: bool = True):
        super().__init__()
        self.enable_masking = enable_masking

    def format(self, record):
        message = record.getMessage()

        if self.enable_masking:
            message = LogMasker.mask_api_keys(message)

        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if hasattr(record, 'extra_fields'):
            extra_fields = record.extra_fields
            if self.enable_masking:
                extra_fields = LogMasker.sanitize_log_data(extra_fields)
            log_obj.update(extra_fields)

        if record.exc_info:
            exception_msg = self.formatException(record.exc_info)
            if self.enable_masking:
                exception_msg = LogMasker.mask_api_keys(exception_msg)
            log_obj["exception"] = exception_msg

        return json.dumps(log_obj, ensure_ascii=False, default=str)


class ObservabilityLogger:
    """Logger with JSON output and keyword extra fields"""

    def __init__(self, name: str, level: Optional[str] = None, json_output: Optional[bool] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))

        self.logger.handlers = []

        handler = logging.StreamHandler()
        if settings.log_json if json_output is None else json_output:
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        self.logger.addHandler(handler)

    def log(self, level: str, message: str, **kwargs):
        """Log with extra fields"""
        self.logger.log(
            getattr(logging, level.upper()),
            message,
            extra={'extra_fields': kwargs}
        )

    def debug(self, message: str, **kwargs):
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self.log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self.log(LogLevel.ERROR, message, **kwargs)


# ============================================================================
# Analysis Logging
# ============================================================================

class AnalysisLogger:
    """Logger for analysis requests"""

    def __init__(self):
        self.logger = ObservabilityLogger("purecheck.analysis")

    def log_analysis(
        self,
        backend: str,
        ingredient_count: int,
        overall_score: Optional[int],
        timing_ms: float,
        success: bool = True,
        error: Optional[str] = None
    ):
        """Log a completed (or failed) analysis"""
        self.logger.info(
            "Analysis completed" if success else "Analysis failed",
            component="Analyzer",
            backend=backend,
            ingredient_count=ingredient_count,
            overall_score=overall_score,
            timing_ms=round(timing_ms, 2),
            success=success,
            error=error
        )

    def log_api_request(
        self,
        method: str,
        path: str,
        status_code: int,
        response_time_ms: float
    ):
        """Log API request"""
        self.logger.info(
            "API request",
            component="API",
            method=method,
            path=path,
            status_code=status_code,
            response_time_ms=round(response_time_ms, 2)
        )


# ============================================================================
# Timing Decorator
# ============================================================================

def log_timing(logger: ObservabilityLogger, action: str):
    """Decorator to log function execution time"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            success = True
            error = None
            try:
                return func(*args, **kwargs)
            except Exception as e:
                success = False
                error = str(e)
                raise
            finally:
                timing_ms = (time.time() - start_time) * 1000
                logger.debug(
                    f"{action} completed",
                    action=action,
                    function=func.__name__,
                    timing_ms=round(timing_ms, 2),
                    success=success,
                    error=error
                )
        return wrapper
    return decorator


# ============================================================================
# Metrics Collection (Prometheus)
# ============================================================================

registry = CollectorRegistry()

analyses_counter = Counter(
    'purecheck_analyses_total',
    'Total ingredient analyses',
    ['backend', 'outcome'],
    registry=registry
)

analysis_duration = Histogram(
    'purecheck_analysis_seconds',
    'Ingredient analysis duration',
    ['backend'],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
    registry=registry
)

ingredients_histogram = Histogram(
    'purecheck_ingredients_per_analysis',
    'Distinct ingredients per analysis',
    buckets=(0, 1, 5, 10, 20, 30, 50, 100),
    registry=registry
)

purity_score_histogram = Histogram(
    'purecheck_purity_score',
    'Purity score distribution',
    buckets=(10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
    registry=registry
)

api_requests_counter = Counter(
    'purecheck_api_requests_total',
    'Total API requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

api_response_time = Histogram(
    'purecheck_api_response_seconds',
    'API response time',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=registry
)


class MetricsCollector:
    """Collect and expose metrics"""

    def record_analysis(
        self,
        backend: str,
        success: bool,
        duration_seconds: float,
        ingredient_count: int = 0,
        overall_score: Optional[int] = None
    ):
        """Record analysis metrics"""
        analyses_counter.labels(backend=backend, outcome="success" if success else "failure").inc()
        analysis_duration.labels(backend=backend).observe(duration_seconds)
        if success:
            ingredients_histogram.observe(ingredient_count)
            if overall_score is not None:
                purity_score_histogram.observe(overall_score)

    def record_api_request(
        self,
        method: str,
        endpoint: str,
        status: int,
        response_time: float
    ):
        """Record API request metrics"""
        api_requests_counter.labels(
            method=method,
            endpoint=endpoint,
            status=status
        ).inc()
        api_response_time.labels(
            method=method,
            endpoint=endpoint
        ).observe(response_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format"""
        return generate_latest(registry)


# ============================================================================
# Global Instances
# ============================================================================

analysis_logger = AnalysisLogger()
metrics_collector = MetricsCollector()


def get_logger(component: str) -> ObservabilityLogger:
    """Get logger for component"""
    return ObservabilityLogger(f"purecheck.{component}")


__all__ = [
    'LogMasker',
    'JSONFormatter',
    'ObservabilityLogger',
    'AnalysisLogger',
    'analysis_logger',
    'metrics_collector',
    'get_logger',
    'log_timing',
    'MetricsCollector',
]
