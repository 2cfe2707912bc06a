"""Switch between named git configuration profiles kept in ~/.config/gitconfigs."""

__version__ = "0.1.0"