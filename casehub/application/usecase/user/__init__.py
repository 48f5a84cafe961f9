"""User use cases."""

from casehub.application.usecase.user.get_my_tracker_login import (
    GetMyTrackerLoginUseCase,
)
from casehub.application.usecase.user.update_my_name import UpdateMyNameUseCase

__all__ = ["GetMyTrackerLoginUseCase", "UpdateMyNameUseCase"]
