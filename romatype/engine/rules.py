"""Context rules for a single unit.

Every rule is a pure function of the unit's spellings, the spellings of the
unit that follows it (where the rule looks ahead) and the tentative buffer.
"""

from typing import Sequence

from .base import MatchOutcome
from .units import GLIDE_LETTER, NASAL_LETTER, VOWELS, doubling_letters

# A bare nasal letter followed by one of these reads as another unit ("na", "nya", "nn")
NASAL_AMBIGUOUS_FOLLOWERS = VOWELS | {GLIDE_LETTER, NASAL_LETTER}


def match_plain(spellings: Sequence[str], tentative: str, length: int = 1) -> MatchOutcome:
    """Exact spelling completes the unit, a proper prefix waits for more keys."""
    if tentative in spellings:
        return MatchOutcome.complete(length)
    if any(s.startswith(tentative) for s in spellings):
        return MatchOutcome.partial(tentative)
    return MatchOutcome.reject()


def match_geminate(escapes: Sequence[str], following_spellings: Sequence[str], tentative: str) -> MatchOutcome:
    """Geminate marker with a unit after it.

    The first letter of a following spelling completes the marker and is also
    the first letter of the following unit. Otherwise only the explicit escape
    spellings ("xtu", "ltu", ...) apply.
    """
    if len(tentative) == 1 and tentative in doubling_letters(tuple(following_spellings)):
        return MatchOutcome.complete(1, leftover=tentative)
    return match_plain(escapes, tentative, 1)


def nasal_completes_alone(following_spellings: Sequence[str]) -> bool:
    """True when a bare nasal letter cannot be confused with the next unit."""
    return not any(s[0] in NASAL_AMBIGUOUS_FOLLOWERS for s in following_spellings)


def match_nasal(spellings: Sequence[str], following_spellings: Sequence[str], tentative: str) -> MatchOutcome:
    """Syllabic nasal.

    Explicit spellings ("nn", "n'", "xn") always complete. A bare "n" completes
    straight away when nothing that follows could start with a vowel, "y" or
    "n" (this includes the end of the target); otherwise it waits, and a
    following consonant completes the nasal and spills into the next unit.
    """
    explicit = [s for s in spellings if s != NASAL_LETTER]
    if tentative in explicit:
        return MatchOutcome.complete(1)
    if tentative == NASAL_LETTER:
        if nasal_completes_alone(following_spellings):
            return MatchOutcome.complete(1)
        return MatchOutcome.partial(tentative)
    if any(s.startswith(tentative) for s in explicit):
        return MatchOutcome.partial(tentative)
    if (
        len(tentative) >= 2
        and tentative[0] == NASAL_LETTER
        and tentative[1] not in NASAL_AMBIGUOUS_FOLLOWERS
    ):
        return MatchOutcome.complete(1, leftover=tentative[1:])
    return MatchOutcome.reject()
