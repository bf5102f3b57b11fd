"""Word lists used by the moderation engine.

All entries are lowercase and matched as plain substrings of the lowercased
content, so short entries also hit inside longer words ("die" in "diet",
"ass" in "class"). Order matters: flagged terms are reported in list order.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Politeness (two or more hits bans the content)
# ---------------------------------------------------------------------------

POLITE_WORDS: tuple[str, ...] = (
    "please", "thank you", "thanks", "appreciate", "grateful", "kindly",
    "wonderful", "amazing", "fantastic", "lovely", "beautiful", "sweet",
    "sorry", "apologize", "excuse me", "pardon", "bless", "blessed",
    "hope you have a", "have a great", "best wishes", "good luck",
    "you're welcome", "no problem", "my pleasure", "happy to help",
    "respectfully", "humbly", "gently", "softly", "kindness", "gentle",
    "wholesome", "positive", "uplifting", "encouraging", "supportive",
    "compliment", "praise", "admire", "respect", "honor", "cherish",
)

POLITE_PHRASES: tuple[str, ...] = (
    "i hope you",
    "wish you the best",
    "sending love",
    "thoughts and prayers",
    "you're doing great",
    "keep up the good work",
    "proud of you",
    "you got this",
    "believe in you",
    "here for you",
    "much love",
    "stay positive",
    "good vibes",
    "virtual hug",
)

# ---------------------------------------------------------------------------
# Illegal content (any hit bans the content)
# ---------------------------------------------------------------------------

DEATH_THREAT_WORDS: tuple[str, ...] = (
    "kill", "murder", "die", "death", "suicide", "hang", "shoot", "stab",
    "poison", "torture", "hurt", "harm", "violence", "weapon", "gun",
    "knife", "bomb", "explosion", "assault", "attack",
)

HARASSMENT_WORDS: tuple[str, ...] = (
    "address", "phone number", "home", "workplace", "school", "family",
    "children", "kids", "personal info", "doxx", "dox", "real name",
)

# ---------------------------------------------------------------------------
# Rudeness scoring
# ---------------------------------------------------------------------------

RUDE_WORDS: tuple[str, ...] = (
    "fuck", "shit", "damn", "hell", "ass", "bitch", "bastard", "crap", "piss",
    "dick", "cock", "pussy", "slut", "whore", "idiot", "moron", "stupid",
    "dumb", "pathetic", "loser", "garbage", "trash", "suck", "sucks",
    "hate", "disgusting", "gross", "ugly", "awful", "terrible", "horrible",
    "worthless", "useless", "pointless", "bullshit", "nonsense", "ridiculous",
    "absurd", "insane", "crazy", "nuts", "mental", "lame",
)

# "damn" is deliberately in both lists and scores twice.
INTENSIFIERS: tuple[str, ...] = (
    "fucking", "damn", "goddamn", "bloody", "totally", "completely",
    "absolutely", "utterly", "extremely", "incredibly", "massively",
)
