"""Maven repository clients."""
