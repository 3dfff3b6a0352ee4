"""Shared contracts for outer surfaces."""
