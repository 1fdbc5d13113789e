"""
GUI module for the R Labs learning platform.

This module provides a PyQt5-based desktop interface that renders the lab
catalog as cards with copy and completion buttons.
"""
