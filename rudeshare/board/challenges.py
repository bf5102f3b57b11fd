"""Daily brutal challenge prompts."""

from __future__ import annotations

import random
from datetime import date
from typing import Optional

BRUTAL_CHALLENGES: tuple[str, ...] = (
    "Roast your biggest failure this year",
    "What's the most overrated thing everyone loves?",
    "Tear apart your worst habit",
    "Which popular opinion makes you want to scream?",
    "Destroy the worst advice you've ever received",
    "What trend needs to die immediately?",
    "Rant about the most annoying type of person",
    "What's your most controversial food opinion?",
    "Which celebrity needs a reality check?",
    "What societal norm is complete BS?",
    "Brutally honest review of your own personality",
    "What's the dumbest thing people waste money on?",
    "Roast the worst movie everyone pretends to like",
    "What makes you lose faith in humanity daily?",
    "Destroy your most embarrassing moment",
    "What's the most toxic positivity you've heard?",
    "Rant about the worst type of social media post",
    "What childhood belief was complete garbage?",
    "Brutally critique your own appearance",
    "What's the most annoying thing about your generation?",
)


def challenge_for_day(day: Optional[date] = None) -> str:
    """Return the challenge for *day* (today by default).

    Rotates through the list by day of the year, so every instance of the
    board agrees on the prompt.
    """
    day = day or date.today()
    return BRUTAL_CHALLENGES[day.timetuple().tm_yday % len(BRUTAL_CHALLENGES)]


def random_challenge() -> str:
    return random.choice(BRUTAL_CHALLENGES)
