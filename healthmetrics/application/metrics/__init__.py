"""Metric evaluation queries."""

from .evaluate_metrics import (
    EvaluateBMIQuery,
    EvaluateBMRQuery,
    EvaluateBodyFatQuery,
    EvaluateMetricsQueryHandler,
    EvaluateWHRQuery,
    MetricReport,
)

__all__ = [
    "EvaluateBMIQuery",
    "EvaluateBMRQuery",
    "EvaluateBodyFatQuery",
    "EvaluateWHRQuery",
    "EvaluateMetricsQueryHandler",
    "MetricReport",
]
