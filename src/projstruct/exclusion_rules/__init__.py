"""Exclusion rules for filtering files and directories."""

from .glob_pattern import SimpleGlobPattern
from .ignore_rules import IgnoreRuleSet
from .rule_loader import DEFAULT_DIRECTORY_IGNORES, load_rules
from .size_rules import SizeExclusionRules

__all__ = [
    "DEFAULT_DIRECTORY_IGNORES",
    "IgnoreRuleSet",
    "SimpleGlobPattern",
    "SizeExclusionRules",
    "load_rules",
]
