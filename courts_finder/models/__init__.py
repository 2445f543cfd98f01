"""Static reference data."""
from courts_finder.models.court_data import COURTS

__all__ = ["COURTS"]
