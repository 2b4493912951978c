"""Core module - settings and time helpers shared by every layer."""
