"""
sqladminlog - Asynchronous logging provider dispatch for SQL Server admin tooling.

Application code enqueues log entries and error records; a background
dispatch loop fans them out to pluggable logging providers.
"""

__version__ = "1.0.0"
