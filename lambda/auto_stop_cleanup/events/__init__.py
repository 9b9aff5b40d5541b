"""CloudWatch Events rules, targets and bus permissions."""

from .rules import list_rule_target_ids, remove_rule_targets, delete_rule, remove_trigger
from .permissions import remove_event_bus_permission

__all__ = [
    "list_rule_target_ids",
    "remove_rule_targets",
    "delete_rule",
    "remove_trigger",
    "remove_event_bus_permission",
]
