"""Protocol parts (one class per module)."""

from .has_model import HasModel
from .has_temperature import HasTemperature
from .has_user import HasUser
from .supports_validation import SupportsValidation

__all__ = ["HasModel", "HasTemperature", "HasUser", "SupportsValidation"]
