from typing import Callable

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.services import ChangeTracker, create_change_tracker_from_settings

TrackerFactory = Callable[[], ChangeTracker]


# Each delivery gets its own tracker so no HTTP client outlives its event
def get_tracker_factory(settings: Settings = Depends(get_settings)) -> TrackerFactory:
    """Return a callable building a fresh change tracker for one delivery."""
    return lambda: create_change_tracker_from_settings(settings)
