"""
FX Exchange - Interactive Currency Converter

Parses ``Exchange <PAIR> <AMOUNT>`` commands, converts the amount through a
fixed table of rates quoted against Danish kroner and reports the result
or a descriptive error.
"""

__version__ = "0.1.0"
__author__ = "FX Exchange Team"
