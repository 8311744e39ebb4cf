#!/usr/bin/env python3
"""
InstantSearch Core.

Reactive bindings between a shared search-state store and view components.
"""

__version__ = "0.1.0"
__author__ = "Search UI Team"
__description__ = "Store bindings and result accumulation for search user interfaces"
