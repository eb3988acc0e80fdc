"""
Adapter implementations for Flight Search.

Adapters are concrete implementations of the port interfaces.
"""
