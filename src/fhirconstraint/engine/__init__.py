"""Expression engine interface and the fhirpathpy-backed implementation."""

from .base import EvaluationObserver, EvaluationTrace, ExpressionEngine, PathDirective
from .fhirpath import FhirpathEngine, log_trace

__all__ = [
    "EvaluationObserver",
    "EvaluationTrace",
    "ExpressionEngine",
    "FhirpathEngine",
    "PathDirective",
    "log_trace",
]
