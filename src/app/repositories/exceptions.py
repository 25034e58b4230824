class DuplicateRecordError(Exception):
    """Raised by repositories when a uniqueness constraint rejects a write"""
