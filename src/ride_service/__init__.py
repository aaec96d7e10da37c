"""Ride Service: HTTP-сервис для хранения и выдачи поездок."""

__version__ = "0.1.0"
