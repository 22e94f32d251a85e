"""
crudgen - CRUD scaffolding generator.

Generates a TypeScript data-access client, type declarations, react-query
hooks and barrel exports for an entity from a JSON field schema.
"""

__version__ = "1.0.0"
