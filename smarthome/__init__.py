"""
SmartHome Catalogue
===================

In-memory model of a house, its rooms and devices, and the
configuration-driven catalogue used to plug sensors and actuators into
devices.
"""

__version__ = "1.0.0"
