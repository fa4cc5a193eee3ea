"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Records live
in ``core.store.InMemoryStore`` collections declared at module level;
by isolating logic here you can swap those in-memory structures for
database queries without changing API handlers.
"""
