"""Interactive NiceGUI explorer for monster statistics."""
