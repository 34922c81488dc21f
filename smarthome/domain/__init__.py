"""
Domain Layer
============
House, rooms, devices and the pluggable components they own.
"""
