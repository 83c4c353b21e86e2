"""Post-upgrade verification of fleet hotpatch logs."""

__version__ = "0.1.0"
