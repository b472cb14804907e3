"""Definitions shared by all targets."""
