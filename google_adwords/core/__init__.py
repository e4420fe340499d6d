"""
Core configuration, logging, exceptions and retry policy.
"""
