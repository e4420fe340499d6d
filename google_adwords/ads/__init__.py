"""
Google Ads client library boundary: session building and error parsing.
"""
