"""Build execution domain exports."""

from .build_contracts import BuildOutcome, BuildRequest
from .schema_build_use_case import (
    BuildExecutionError,
    execute_schema_build,
    load_mapping_session,
)

__all__ = [
    "BuildOutcome",
    "BuildRequest",
    "BuildExecutionError",
    "execute_schema_build",
    "load_mapping_session",
]
