"""Weather Rules.

Fetches the National Weather Service forecast for a grid point, keeps the
first two periods and evaluates a fixed set of named boolean rules
(HOT_TODAY, COLD_TODAY, MODERATE_TODAY, GETTING_COLDER) against them.
"""

__version__ = "0.1.0"
