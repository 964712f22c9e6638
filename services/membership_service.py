# services/membership_service.py
"""
membership_service.py

Resolves the customer tier that selects a volume-discount schedule.

Tiers:
    guest   : anonymous or unknown customers (the default)
    regular : returning customers
    vip     : VIP customers

A missing profile, a profile without a tier, or a tier name that is
not in the schedule all resolve to "guest".
"""

from typing import Any, Mapping, Optional

from models.customer import GUEST


def profile_tier(profile: Any) -> Optional[str]:
    # Raw tier of a CustomerProfile or a {"tier": ...} dict.
    if profile is None:
        return None
    if isinstance(profile, Mapping):
        return profile.get("tier")
    return getattr(profile, "tier", None)


def resolve_tier(profile: Any, known_tiers: Mapping[str, Any]) -> str:
    # Tier to use for pricing, falling back to guest.
    tier = profile_tier(profile)
    if isinstance(tier, str) and tier in known_tiers:
        return tier
    return GUEST
