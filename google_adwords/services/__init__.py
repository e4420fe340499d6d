"""
Services package for google-adwords.

Services:
    - keyword_volume_service: keyword search volume reports
    - location_service: location name to geo target id lookups
"""
