from silo_wizard.core.constants.base import ZERO_ADDRESS

__all__ = ["ZERO_ADDRESS"]
