from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class BookingAttempt:
    timestamp: datetime
    customer_name: str
    seat_ids: List[str]
    success: bool
    booking_id: Optional[str] = None
    reason: Optional[str] = None    # RejectionReason value when rejected
    last_resort: bool = False
    isolated_seats: List[str] = field(default_factory=list)
