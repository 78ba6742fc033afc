"""
Per-domain repository modules for database access.

Functions take an explicit `Session`; single-statement writes commit
themselves, while helpers used inside a larger unit of work only flush and
leave the commit to the caller.
"""
