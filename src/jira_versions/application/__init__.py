"""
Application Layer - Use cases and orchestration.

This layer contains:
- sync/: Reconciler, resilient writer and the sync orchestrator
"""

from .sync import (
    ResilientWriter,
    RetryPolicy,
    SessionManager,
    SyncResult,
    VersionReconciler,
    VersionSyncOrchestrator,
)

__all__ = [
    "ResilientWriter",
    "RetryPolicy",
    "SessionManager",
    "SyncResult",
    "VersionReconciler",
    "VersionSyncOrchestrator",
]
