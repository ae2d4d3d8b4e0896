"""Domain records and validators (no I/O)."""
