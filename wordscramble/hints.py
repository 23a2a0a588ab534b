"""
Deterministic word hints.

The same word always yields the same hint: choices are indexed by the sum
of the word's character codes, never by the game's random source.
"""

VOWELS = "aeiou"

HINT_PREFIXES = [
    "This word", "A term that", "A concept that", "Something that",
    "A word that", "An expression that", "This example", "This term",
]

HINT_ATTRIBUTES = [
    'starts with "{first}"',
    'ends with "{last}"',
    "has {length} letters",
    'contains the letters "{vowels}"',
    "has {syllables} syllables",
    'contains repeating "{repeat}"',
    'uses the pattern "{pattern}"',
]

HINT_CONTEXTS = [
    "in modern programming",
    "in data structures",
    "in web development",
    "in coding challenges",
    "in software design",
    "in tech communities",
    "among developers",
    "in computer science",
    "in virtual environments",
    "in digital systems",
]


def count_syllables(word: str) -> int:
    """Approximate syllables as vowel groups, at least one."""
    count = 0
    last_was_vowel = False
    for ch in word.lower():
        is_vowel = ch in VOWELS
        if is_vowel and not last_was_vowel:
            count += 1
        last_was_vowel = is_vowel
    return max(1, count)


def find_repeating(word: str) -> str:
    for a, b in zip(word, word[1:]):
        if a == b:
            return a
    return ""


def extract_pattern(word: str) -> str:
    if len(word) <= 3:
        return word
    return f"{word[:2]}...{word[-2:]}"


def hint(word: str) -> str:
    if not word:
        return ""
    word_sum = sum(ord(ch) for ch in word)
    vowels = "".join(ch for ch in word if ch in VOWELS)
    repeat = find_repeating(word)

    prefix = HINT_PREFIXES[word_sum % len(HINT_PREFIXES)]
    template = HINT_ATTRIBUTES[(word_sum * 13) % len(HINT_ATTRIBUTES)]
    context = HINT_CONTEXTS[(word_sum * 17) % len(HINT_CONTEXTS)]

    # Fall back to the length when the chosen attribute has nothing to show
    if ("repeating" in template and not repeat) or ("vowels" in template and len(vowels) < 2):
        attribute = f"has {len(word)} letters"
    else:
        attribute = template.format(
            first=word[0],
            last=word[-1],
            length=len(word),
            vowels=vowels,
            syllables=count_syllables(word),
            repeat=repeat,
            pattern=extract_pattern(word),
        )
    return f"{prefix} {attribute} {context}"
