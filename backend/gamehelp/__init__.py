"""Game help chat widget backend."""
