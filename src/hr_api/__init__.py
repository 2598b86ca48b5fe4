"""HR API: employee directory, absence requests and peer feedback."""

__version__ = "0.1.0"
