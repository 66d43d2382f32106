"""Documentation rules: root types, root fields, user types and their fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import (
    OperationType,
    is_input_object_type,
    is_interface_type,
    is_object_type,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphql import GraphQLField, GraphQLInputField, GraphQLNamedType, GraphQLSchema

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BUILTIN_SCALARS: frozenset[str] = frozenset({"String", "Int", "Float", "Boolean", "ID"})

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_documented(description: str | None) -> bool:
    """Return True if *description* is present and non-empty."""
    return bool(description)


def is_builtin_type(name: str) -> bool:
    """Introspection types and the specified scalars are never policed."""
    return name.startswith("__") or name in BUILTIN_SCALARS


def _root_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    return [
        t
        for t in (schema.query_type, schema.mutation_type, schema.subscription_type)
        if t is not None
    ]


def policed_types(schema: GraphQLSchema) -> Iterator[GraphQLNamedType]:
    """Yield user-defined types in declaration order.

    Built-in types and the operation root types are skipped.
    """
    roots = _root_types(schema)
    for name, type_ in schema.type_map.items():
        if is_builtin_type(name):
            continue
        if any(type_ is root for root in roots):
            continue
        yield type_


def type_fields(
    type_: GraphQLNamedType,
) -> dict[str, GraphQLField] | dict[str, GraphQLInputField]:
    """Fields of object, interface and input types; empty for other kinds."""
    if is_object_type(type_) or is_interface_type(type_) or is_input_object_type(type_):
        return type_.fields  # type: ignore[attr-defined, no-any-return]
    return {}


# ---------------------------------------------------------------------------
# Root types
# ---------------------------------------------------------------------------


def _label(operation: OperationType) -> str:
    return operation.value.capitalize()


def _check_root_type(schema: GraphQLSchema, operation: OperationType, errors: list[str]) -> None:
    root = schema.get_root_type(operation)
    if root is None:
        return
    if not is_documented(root.description):
        errors.append(f'{_label(operation)} type "{root.name}" is missing documentation')


def _check_root_fields(schema: GraphQLSchema, operation: OperationType, errors: list[str]) -> None:
    root = schema.get_root_type(operation)
    if root is None:
        return
    for field_name, field in root.fields.items():
        if not is_documented(field.description):
            errors.append(
                f'{_label(operation)} field "{root.name}.{field_name}" is missing documentation'
            )


def validate_query_type_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag an undocumented Query root type."""
    _check_root_type(schema, OperationType.QUERY, errors)


def validate_mutation_type_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag an undocumented Mutation root type."""
    _check_root_type(schema, OperationType.MUTATION, errors)


def validate_subscription_type_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag an undocumented Subscription root type."""
    _check_root_type(schema, OperationType.SUBSCRIPTION, errors)


def validate_query_fields_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag every undocumented field of the Query root type."""
    _check_root_fields(schema, OperationType.QUERY, errors)


def validate_mutation_fields_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag every undocumented field of the Mutation root type."""
    _check_root_fields(schema, OperationType.MUTATION, errors)


def validate_subscription_fields_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag every undocumented field of the Subscription root type."""
    _check_root_fields(schema, OperationType.SUBSCRIPTION, errors)


# ---------------------------------------------------------------------------
# User-defined types
# ---------------------------------------------------------------------------


def validate_type_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag every undocumented user-defined type.

    Covers objects, interfaces, unions, enums, inputs and custom scalars.
    Root types are left to the root-type rules.
    """
    for type_ in policed_types(schema):
        if not is_documented(type_.description):
            errors.append(f'Type "{type_.name}" is missing documentation')


def validate_type_fields_documentation(schema: GraphQLSchema, errors: list[str]) -> None:
    """Flag every undocumented field of a user-defined type."""
    for type_ in policed_types(schema):
        for field_name, field in type_fields(type_).items():
            if not is_documented(field.description):
                errors.append(f'Field "{type_.name}.{field_name}" is missing documentation')
