"""SQLAlchemy-модели приложения."""

from ride_service.models.ride import Ride

__all__ = ["Ride"]
