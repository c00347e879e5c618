"""Audience segmentation: age, gender, geography, new vs returning.

All counts are per check-in, so a guest scanned twice at one event weighs
twice, matching how entries are counted everywhere else in a report.
"""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from eventry.analytics.revenue import percentage
from eventry.analytics.types import CheckInWithTicketContext

AGE_BUCKETS = ("18-21", "22-25", "26-30", "31-35", "35+", "unknown")
GENDER_BUCKETS = ("M", "F", "unknown")


def age_bucket(age: int) -> Optional[str]:
    """Bin an age in years. Under-18 ages have no bin."""
    if 18 <= age <= 21:
        return "18-21"
    if 22 <= age <= 25:
        return "22-25"
    if 26 <= age <= 30:
        return "26-30"
    if 31 <= age <= 35:
        return "31-35"
    if age > 35:
        return "35+"
    return None


@dataclass(frozen=True)
class AudienceProfile:
    total_entries: int
    age_distribution: dict[str, int]
    avg_age: Optional[float]
    gender_distribution: dict[str, int]
    # (city, count), most frequent first, ties in first-seen order
    city_ranking: tuple[tuple[str, int], ...]
    new_customers: int
    returning_customers: int

    def top_cities(self, limit: int) -> list[tuple[str, int]]:
        return list(self.city_ranking[:limit])


def segment_audience(
    check_ins: Sequence[CheckInWithTicketContext],
    today: Optional[date] = None,
) -> AudienceProfile:
    """
    Derive the audience profile of a set of check-ins in one pass.

    Age is `today.year - birth_date.year`; day and month are ignored.
    Check-ins without a guest or birth date land in "unknown". Known ages
    under 18 contribute to the average but to no bin.

    A check-in is new when its guest's `total_events` is exactly 1 and
    returning when it has a guest that is not new. Check-ins without a
    guest are neither.
    """
    current_year = (today or date.today()).year

    ages = dict.fromkeys(AGE_BUCKETS, 0)
    genders = dict.fromkeys(GENDER_BUCKETS, 0)
    cities: Counter = Counter()
    age_total = 0
    age_count = 0
    new_customers = 0
    known_guests = 0

    for check_in in check_ins:
        guest = check_in.ticket.guest

        if guest is not None and guest.birth_date is not None:
            age = current_year - guest.birth_date.year
            age_total += age
            age_count += 1
            bucket = age_bucket(age)
            if bucket is not None:
                ages[bucket] += 1
        else:
            ages["unknown"] += 1

        gender = (guest.gender or "").upper() if guest is not None else ""
        genders[gender if gender in ("M", "F") else "unknown"] += 1

        if guest is None:
            continue

        if guest.city:
            cities[guest.city.strip()] += 1

        known_guests += 1
        if guest.is_new:
            new_customers += 1

    return AudienceProfile(
        total_entries=len(check_ins),
        age_distribution=ages,
        avg_age=age_total / age_count if age_count else None,
        gender_distribution=genders,
        # Counter.most_common keeps insertion order among equal counts
        city_ranking=tuple(cities.most_common()),
        new_customers=new_customers,
        returning_customers=known_guests - new_customers,
    )


def out_of_town_vs_venue(profile: AudienceProfile, venue_city: Optional[str]) -> float:
    """Share of check-ins whose guest city is not the venue's city (single event)."""
    home = (venue_city or "").strip().casefold()
    local = sum(count for city, count in profile.city_ranking if home and city.casefold() == home)
    return percentage(profile.total_entries - local, profile.total_entries)


def out_of_town_vs_top_city(profile: AudienceProfile) -> float:
    """Share of check-ins outside the audience's most frequent city (cross-event)."""
    local = profile.city_ranking[0][1] if profile.city_ranking else 0
    return percentage(profile.total_entries - local, profile.total_entries)
