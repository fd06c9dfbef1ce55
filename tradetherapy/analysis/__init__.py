"""Journal analysis: summary statistics and behavioral patterns."""

from tradetherapy.analysis.patterns import PATTERN_RULES, RuleSpec, detect_patterns
from tradetherapy.analysis.stats import calculate_stats

__all__ = ["PATTERN_RULES", "RuleSpec", "calculate_stats", "detect_patterns"]
