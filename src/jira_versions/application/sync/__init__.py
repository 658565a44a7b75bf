"""
Sync Module - Reconciliation of repository releases with tracker versions.
"""

from .orchestrator import SyncResult, VersionSyncOrchestrator
from .reconciler import VersionReconciler
from .session import SessionManager
from .writer import ResilientWriter, RetryPolicy

__all__ = [
    "SyncResult",
    "VersionSyncOrchestrator",
    "VersionReconciler",
    "SessionManager",
    "ResilientWriter",
    "RetryPolicy",
]
