"""Utility functions for Realty Core.

Import convention: use module-level imports for clarity.

    from realty_core.utils import isodatetime, uid
    timestamp = isodatetime.now()
    record_id = uid.generate_uuid()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
