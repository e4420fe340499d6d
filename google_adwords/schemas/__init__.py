"""
Shared enums, models and the operation result envelope.

Import specific modules directly to avoid circular imports:
    from google_adwords.schemas.enums import AttributeType
    from google_adwords.schemas.responses import OperationResult
"""
