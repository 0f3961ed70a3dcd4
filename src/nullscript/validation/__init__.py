from __future__ import annotations

from nullscript.validation.validator import Violation, collect_violations, validate

__all__ = ["Violation", "collect_violations", "validate"]
