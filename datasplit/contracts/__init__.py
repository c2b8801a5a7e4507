"""Configuration and result contracts.

Pydantic models used to validate split configuration payloads across the
CLI, the HTTP backend and scripts:

    from datasplit.contracts.run_config import RunConfig
"""

from datasplit.contracts.split_configs import DEFAULT_TEST_RATIO, SplitModel
from datasplit.contracts.run_config import DataModel, OutputModel, RunConfig
from datasplit.contracts.results import SplitRunResult

__all__ = [
    "DEFAULT_TEST_RATIO",
    "SplitModel",
    "DataModel",
    "OutputModel",
    "RunConfig",
    "SplitRunResult",
]
