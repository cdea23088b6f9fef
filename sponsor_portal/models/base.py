"""
Shared column helpers

Row ids are UUID strings issued by the hosted backend.
"""

import uuid


def new_id():
    return str(uuid.uuid4())
