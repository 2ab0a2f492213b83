"""Deterministic face scoring core."""
from .aggregator import aggregate
from .comparator import compare
from .engine import FaceScoringEngine
from .normalizer import normalize
from .planner import plan
from .tiers import classify

__all__ = ["aggregate", "classify", "compare", "normalize", "plan", "FaceScoringEngine"]
