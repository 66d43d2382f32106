"""GraphQL schema documentation and field-order policy checker."""

__version__ = "0.1.0"
