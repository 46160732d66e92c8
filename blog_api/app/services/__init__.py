"""
Service layer abstraction.

Each service encapsulates the SQL for a domain so API handlers only
deal with schemas and envelopes.
"""
