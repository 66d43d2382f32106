"""Policy rules and the ordered table mapping config flags to checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gqlpolicy.rules.alphabetical_order import validate_alphabetical_order
from gqlpolicy.rules.documentation import (
    BUILTIN_SCALARS,
    is_builtin_type,
    is_documented,
    policed_types,
    validate_mutation_fields_documentation,
    validate_mutation_type_documentation,
    validate_query_fields_documentation,
    validate_query_type_documentation,
    validate_subscription_fields_documentation,
    validate_subscription_type_documentation,
    validate_type_documentation,
    validate_type_fields_documentation,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphql import GraphQLSchema

    Checker = Callable[[GraphQLSchema, list[str]], None]

# Run order is report order.
RULES: list[tuple[str, Checker]] = [
    ("validateSubscriptionType", validate_subscription_type_documentation),
    ("validateSubscriptionFields", validate_subscription_fields_documentation),
    ("validateQueryType", validate_query_type_documentation),
    ("validateQueryFields", validate_query_fields_documentation),
    ("validateMutationType", validate_mutation_type_documentation),
    ("validateMutationFields", validate_mutation_fields_documentation),
    ("validateTypeType", validate_type_documentation),
    ("validateBasicTypeFields", validate_type_fields_documentation),
    ("alphabeticalOrderFields", validate_alphabetical_order),
]

__all__ = [
    "BUILTIN_SCALARS",
    "RULES",
    "is_builtin_type",
    "is_documented",
    "policed_types",
    "validate_alphabetical_order",
    "validate_mutation_fields_documentation",
    "validate_mutation_type_documentation",
    "validate_query_fields_documentation",
    "validate_query_type_documentation",
    "validate_subscription_fields_documentation",
    "validate_subscription_type_documentation",
    "validate_type_documentation",
    "validate_type_fields_documentation",
]
