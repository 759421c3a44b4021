"""
Database plumbing: async engine and sessions (async_db) and the
conversions applied at the query boundary (converters).
"""
