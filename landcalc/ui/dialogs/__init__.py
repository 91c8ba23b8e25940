from .settings import SettingsDialog
from .common import UnitReferenceDialog
