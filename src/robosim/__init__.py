"""robosim: toy robot simulator on a bounded grid."""

__version__ = "0.1.0"
