"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.

    Status flow:
        REGISTERED → SENT → DELIVERED
    Address changes and deletion are only allowed while REGISTERED.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
