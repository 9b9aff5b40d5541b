"""Lambda permissions and event source mappings."""

from .permissions import remove_lambda_permission
from .event_sources import (
    find_event_source_mappings,
    delete_event_source_mapping,
    delete_event_source_mappings,
)

__all__ = [
    "remove_lambda_permission",
    "find_event_source_mappings",
    "delete_event_source_mapping",
    "delete_event_source_mappings",
]
