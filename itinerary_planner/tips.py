# itinerary_planner/tips.py
from types import MappingProxyType
from typing import List, Sequence

MAX_TIPS = 8

GENERAL_TIPS = (
    "Research local customs and etiquette before visiting {city}",
    "Keep emergency numbers handy and know embassy locations",
    "Learn basic phrases in the local language",
    "Always carry copies of important documents",
    "Be aware of local scams and tourist traps",
    "Respect local dress codes and cultural norms",
    "Keep valuables secure and be mindful of pickpockets",
)

INTEREST_TIPS = MappingProxyType({
    "Food & Dining": "Try local specialties and ask locals for restaurant recommendations in {city}",
    "Culture & History": "Visit {city} during local festivals for authentic cultural experiences",
    "Nature & Outdoors": "Check weather conditions and pack appropriate gear for outdoor activities in {city}",
    "Shopping": "Visit local markets early in the morning for the best selection and prices in {city}",
    "Adventure Sports": "Ensure you have proper safety equipment and local guides for adventure activities in {city}",
})
GENERIC_INTEREST_TIP = "Research {interest} opportunities specific to {city}"

EMERGENCY_CONTACTS = (
    "Emergency Services: 911 (or local equivalent)",
    "Local Police: Check with your hotel for nearest station",
    "Hospital: Ask your hotel for nearest medical facility",
    "Your Country's Embassy: Check embassy website",
    "Hotel Front Desk: Available 24/7 for assistance",
    "Tourist Information Center: Usually in city center",
    "{city} Tourism Board: Visit official tourism website",
    "Local Emergency: Ask hotel staff for local emergency numbers",
)


def interest_tip(city: str, interest: str) -> str:
    template = INTEREST_TIPS.get(interest, GENERIC_INTEREST_TIP)
    return template.format(city=city, interest=interest.lower())


def generate_tips(city: str, interests: Sequence[str]) -> List[str]:
    """General travel tips followed by one per interest, capped at MAX_TIPS."""
    tips = [tip.format(city=city) for tip in GENERAL_TIPS]
    tips.extend(interest_tip(city, interest) for interest in interests)
    return tips[:MAX_TIPS]


def generate_contacts(city: str) -> List[str]:
    return [contact.format(city=city) for contact in EMERGENCY_CONTACTS]
