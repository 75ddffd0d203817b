"""Infrastructure layer — notebook discovery and the zk CLI adapter.

This layer talks to the filesystem and spawns subprocesses.
It must never import from services, commands, or output.
"""
