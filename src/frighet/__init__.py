"""
Contact and estimate service for frighet.ro.

A Flask API backing the freeze-drying marketing page: it previews
price/time estimates and forwards contact requests by email through Mailjet.
"""

__version__ = "1.0.0"
__author__ = "frighet.ro"
