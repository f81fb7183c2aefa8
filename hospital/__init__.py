"""Hospital management backend."""
