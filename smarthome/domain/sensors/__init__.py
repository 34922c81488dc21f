"""
Sensors
=======
Sensor interface, catalogue and shipped implementations.
"""

from smarthome.domain.sensors.catalogue import SensorCatalogue
from smarthome.domain.sensors.sensor import Sensor, ValueSensor

__all__ = ["Sensor", "SensorCatalogue", "ValueSensor"]
