"""
UnionEvent Adapters

Integration with web UI frameworks.
"""

from .fasthtml import describe, on_compose_ft, on_receive_ft, setup_lifecycle, lifecycle_script

__all__ = ["describe", "on_compose_ft", "on_receive_ft", "setup_lifecycle", "lifecycle_script"]
