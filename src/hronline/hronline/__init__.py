"""HR Online attendance record store.

Feature modules (attendance, reports, storage, ...) sit on top of a small
key/value host store that holds every punch in a single string value.
"""
