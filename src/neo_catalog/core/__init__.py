"""Core exceptions and shared types for neo-catalog."""
