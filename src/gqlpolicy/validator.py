"""Validation run: dispatch enabled rules over a schema, aggregate and format results."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gqlpolicy.rules import RULES

if TYPE_CHECKING:
    from graphql import GraphQLSchema

    from gqlpolicy.config import RuleConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class ValidationResult:
    """Result of a validation run."""

    violations: list[str] = field(default_factory=list)
    rules_evaluated: int = 0
    elapsed_ms: float = 0.0

    @property
    def passed(self) -> bool:
        """True when no rule reported a violation."""
        return not self.violations


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def validate(schema: GraphQLSchema, config: RuleConfig) -> ValidationResult:
    """Run every enabled rule against *schema*, in rule-table order.

    All enabled rules run to completion; violations are never short-circuited.
    """
    start = time.monotonic()
    errors: list[str] = []
    evaluated = 0

    for flag, checker in RULES:
        if not config.enabled(flag):
            continue
        before = len(errors)
        checker(schema, errors)
        evaluated += 1
        logger.debug("Rule %s: %d violation(s)", flag, len(errors) - before)

    elapsed = (time.monotonic() - start) * 1000
    return ValidationResult(violations=errors, rules_evaluated=evaluated, elapsed_ms=elapsed)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_text(result: ValidationResult) -> str:
    """Format a ValidationResult for the terminal.

    Example output with violations::

        ✗ Type "Widget" is missing documentation
        ✗ Field "Widget.id" is missing documentation

        2 violations found (3 rules evaluated)

    Example output without violations::

        ✓ Schema policy validation passed (3 rules evaluated)
    """
    if result.passed:
        return f"✓ Schema policy validation passed ({result.rules_evaluated} rules evaluated)"

    lines = [f"✗ {violation}" for violation in result.violations]
    lines.append("")
    lines.append(
        f"{len(result.violations)} violations found ({result.rules_evaluated} rules evaluated)"
    )
    return "\n".join(lines)


def format_json(result: ValidationResult) -> str:
    """Format a ValidationResult as JSON with ``violations`` and ``summary``."""
    output: dict[str, object] = {
        "violations": list(result.violations),
        "summary": {
            "passed": result.passed,
            "rules_evaluated": result.rules_evaluated,
            "violations_count": len(result.violations),
            "elapsed_ms": result.elapsed_ms,
        },
    }
    return json.dumps(output, indent=2)
