"""Realtime infrastructure (Socket.IO).

One Socket.IO server carries every dashboard event: the `init` snapshot,
incremental `entryChanged` notices, and the client-side mutation events.
"""
