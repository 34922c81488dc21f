"""
Application Services
====================
Use-case entry points that accept and return schemas and delegate to the
house aggregate.
"""

from smarthome.services.device_service import DeviceService
from smarthome.services.house_service import HouseService
from smarthome.services.report_service import ReportService

__all__ = ["DeviceService", "HouseService", "ReportService"]
