from dataclasses import dataclass


@dataclass
class HallStatistics:
    total_bookings: int             # accepted bookings since the last reset
    rejected_bookings: int          # fragmentation rejections since the last reset
    fragmentation_pct: float        # isolated free seats / free seats, 0-100
    utilization_pct: float          # occupied / total seats, 0-100
    total_seats: int
    occupied_seats: int

    @property
    def free_seats(self) -> int:
        return self.total_seats - self.occupied_seats
