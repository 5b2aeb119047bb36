"""
Storage abstractions for the Chad Log runtime.

Includes:
- LogStore: the append / list / count contract
- InMemoryLogStore: process-local storage guarded by a reader/writer lock
- SqliteLogStore: durable storage in a single SQLite table
- create_log_store: picks one of the above from configuration
"""
