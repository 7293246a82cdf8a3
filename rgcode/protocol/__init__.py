"""Typed instruction set and text wire format."""
