"""Whole-request validation (required fields, ranges, alternate-pair conflicts)."""

from .engine import RULES, ensure_valid, validate
from .report import ValidationReport

__all__ = ["RULES", "ValidationReport", "ensure_valid", "validate"]
