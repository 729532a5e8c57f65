"""Feature modules for neo-catalog."""
