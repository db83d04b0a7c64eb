import re

VOWELS = "aeiouy"


def count_syllables(word: str) -> int:
    """
    Approximate syllable count from spelling alone.

    Counts vowel clusters after dropping a silent trailing 'e'. Adjacent
    vowels count once, so diphthongs ("variant") are not overcounted.
    Returns 0 for empty input or input without vowels.
    """
    word = re.sub(r'[^a-z]', '', word.lower())
    if not word:
        return 0
    if word.endswith("e") and not word.endswith("le") and any(c in VOWELS for c in word[:-1]):
        word = word[:-1]
    syllable_count = 0
    prev_char_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_char_was_vowel:
            syllable_count += 1
        prev_char_was_vowel = is_vowel
    return syllable_count
