# models/customer.py
from dataclasses import dataclass
# Customer and delivery context models passed alongside an order.

GUEST = "guest"
REGULAR = "regular"
VIP = "vip"

LOCAL = "local"
OUTER = "outer"


@dataclass(frozen=True)
class CustomerProfile:
    tier: str = GUEST


@dataclass(frozen=True)
class DeliveryContext:
    zone: str = LOCAL
    rush: bool = False
