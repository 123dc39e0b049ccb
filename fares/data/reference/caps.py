"""
Cap Zone Configuration

The cap governing a day (or week) is picked from the zone pairs travelled:
any cross-zone pair replaces the current choice, and same-zone travel inside
PREFERRED_ZONE replaces it as well. The last qualifying pair wins.
"""

DEFAULT_CAP_ZONE_PAIR = (2, 2)    # Used when no journey qualifies
PREFERRED_ZONE = 1                # Same-zone travel here overrides the choice
