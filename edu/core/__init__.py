"""
Core utilities shared across the edu package.

This package hosts configuration (env vars, store paths), logging setup,
identifier generation and terminal styling. Services and CLIs depend on these
primitives instead of reading os.environ or sys.stdout directly.
"""
