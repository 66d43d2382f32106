"""Field-order rule: fields of user-defined types must be declared alphabetically."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gqlpolicy.rules.documentation import policed_types, type_fields

if TYPE_CHECKING:
    from graphql import GraphQLSchema


def validate_alphabetical_order(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag each field whose name does not sort strictly after its predecessor.

    Names are compared by code point, so ``Zeta`` sorts before ``alpha``.
    Only adjacent pairs are compared: ``c, b, a`` yields two violations.
    """
    for type_ in policed_types(schema):
        names = list(type_fields(type_))
        for previous, current in zip(names, names[1:]):
            if current <= previous:
                errors.append(
                    f'Field "{type_.name}.{current}" is not in alphabetical order'
                    f' (follows "{previous}")'
                )
