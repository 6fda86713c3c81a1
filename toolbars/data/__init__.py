"""
Editor Toolbars - Data Module

Option records and the batch/toolbar containers that scope them.
"""

from .option_record import GroupType, OptionRecord
from .toolbar_data import OptionBatch, Toolbar

__all__ = ["GroupType", "OptionRecord", "OptionBatch", "Toolbar"]
