"""Shared timestamped debug log: a record store, a test writer and a filtering viewer."""

__version__ = "1.0.0"
__all__ = ["logdb", "logtest", "viewer"]