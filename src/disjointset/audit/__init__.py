"""Audit logging subsystem for disjointset.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope written by AuditLogger
"""

from disjointset.audit.helpers import generate_run_id, get_package_version
from disjointset.audit.logger import AuditLogger
from disjointset.audit.models import LEVELS, LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "LEVELS",
    "generate_run_id",
    "get_package_version",
]
