"""Use-case orchestration.

Use-cases wire configuration, loading, splitting and writing together. They
may collect user-facing notes (warnings) but the split core never does.
"""

from .split_run import collect_config_notes, run_split

__all__ = ["collect_config_notes", "run_split"]
