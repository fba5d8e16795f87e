"""Domain models and value types.

Plain, strict data structures (Pydantic v2 and dataclasses). The domain
does not know about HTTP, the CLI or the terminal.
"""
