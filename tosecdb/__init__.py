"""
tosecdb - TOSEC ROM Database Builder

A Python-based tool to scan TOSEC datfiles or ROM directories, parse ROM
names according to the TOSEC naming convention and build CSV and JSON
database files of their flags.
"""

__version__ = "1.1.0"
__author__ = "Latruffe"
