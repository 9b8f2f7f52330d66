"""
Validators shared by the partial-update request models
"""


def reject_null(value):
    """Fields backed by NOT NULL columns may be omitted, but not set to null"""
    if value is None:
        raise ValueError("may not be null")
    return value
