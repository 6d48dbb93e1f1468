"""Utilities shared by the polis_core modules."""
