"""Integration with the CI runner: inputs and log output."""

from .inputs import get_input, input_env_name, parse_cache_only
from .log import WorkflowCommandFormatter, build_handler, configure_logging, escape_data

__all__ = [
    "WorkflowCommandFormatter",
    "build_handler",
    "configure_logging",
    "escape_data",
    "get_input",
    "input_env_name",
    "parse_cache_only",
]
