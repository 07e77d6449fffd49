from .client import ReservationsClient

__all__ = ["ReservationsClient"]
