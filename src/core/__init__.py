"""
Core domain model and contracts.

The natural-number value type and its JSON contract, independent of any
user-facing surface (CLI, interactive session).
"""
