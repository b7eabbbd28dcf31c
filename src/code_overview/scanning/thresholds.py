"""Threshold tiering of file weights."""

from .models import Tier


def classify(weight: int, good_threshold: int, medium_threshold: int) -> Tier:
    """
    Assign a weight to a tier.

    Both bounds are inclusive on the way up: a weight equal to the medium
    threshold is BAD, a weight equal to the good threshold is MEDIUM. The
    medium check runs first, so with good > medium nothing is ever MEDIUM and
    with good == medium a weight at that value is BAD.
    """
    if weight >= medium_threshold:
        return Tier.BAD
    if weight >= good_threshold:
        return Tier.MEDIUM
    return Tier.GOOD


def is_offender(tier: Tier) -> bool:
    return tier is not Tier.GOOD
