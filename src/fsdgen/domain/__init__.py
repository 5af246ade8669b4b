"""Domain layer — pure layer/slice rules with no I/O.

Nothing here touches the filesystem. Infrastructure and services
import from domain, never the reverse.
"""
