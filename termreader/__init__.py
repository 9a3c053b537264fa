"""State, navigation, background requests and text layout for a terminal novel reader."""

__version__ = "0.1.0"