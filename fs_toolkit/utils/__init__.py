"""Helper modules for fs-toolkit."""
