"""Core interfaces.

Structural contracts (Protocol) implemented by the outer layers, so the
pipeline depends on abstractions rather than on the terminal.
"""
