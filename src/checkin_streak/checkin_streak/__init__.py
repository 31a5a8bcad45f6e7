"""Check-in streak package.

A single immutable bitmask value (``checkin.model.CheckinRecord``) holds the
last 64 days of check-ins for one subject; thin service/settings layers sit
around it the same way the other feature modules are organized.
"""
