"""String algorithms: palindromes, anagrams, windows and matching."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_lowercase


def is_palindrome(s: str) -> bool:
    """Return whether the ASCII letters and digits of ``s`` read the same backwards.

    Case is ignored.
    """
    cleaned = "".join(ch.lower() for ch in s if ch.isascii() and ch.isalnum())
    return cleaned == cleaned[::-1]


def reverse_words(s: str) -> str:
    """Return the whitespace-separated words of ``s`` in reverse order."""
    return " ".join(reversed(s.split()))


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of both words, then append the longer one's rest."""
    shared = min(len(word1), len(word2))
    longer = word1 if len(word1) > len(word2) else word2
    return "".join(a + b for a, b in zip(word1, word2)) + longer[shared:]


def is_isomorphic(s: str, t: str) -> bool:
    """Return whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    mapping: dict[str, str] = {}
    for source, target in zip(s, t):
        if any(key != source and value == target for key, value in mapping.items()):
            return False
        mapping[source] = target
    targets = set(mapping.values())
    return all(ch in targets for ch in t)


def is_anagram(s: str, t: str) -> bool:
    """Return whether ``t`` is a rearrangement of ``s``."""
    return sorted(s) == sorted(t)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return whether every letter of the note can be cut from the magazine."""
    return not Counter(ransom_note) - Counter(magazine)


def is_subsequence(s: str, t: str) -> bool:
    """Return whether ``s`` can be had by deleting characters from ``t``."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest slice of ``s`` without a repeated character."""
    window: set[str] = set()
    left = 0
    best = 0
    for ch in s:
        while ch in window:
            window.discard(s[left])
            left += 1
        window.add(ch)
        best = max(best, len(window))
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest slice that ``k`` replacements can make one repeated letter."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    best = max_frequency = left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_frequency = max(max_frequency, counts[ch])
        while right - left + 1 - max_frequency > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def _letter_counts(word: str) -> tuple[int, ...]:
    if any(ch not in ascii_lowercase for ch in word):
        raise ValueError(f"only lower-case ASCII letters are allowed: {word!r}")
    counts = Counter(word)
    return tuple(counts[letter] for letter in ascii_lowercase)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups are ordered by their letter counts, from ``a`` to ``z``; words keep
    their input order within a group.
    """
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_letter_counts(word), []).append(word)
    return [groups[key] for key in sorted(groups)]


def check_inclusion(s1: str, s2: str) -> bool:
    """Return whether a permutation of ``s1`` is found as a slice of ``s2``."""
    if len(s1) > len(s2):
        return False
    needed = Counter(s1)
    seen: dict[str, int] = {}
    left = 0
    count = 0
    for right, ch in enumerate(s2):
        if ch not in needed:
            count = 0
            left = right + 1
            seen.clear()
        elif seen.get(ch, 0) >= needed[ch]:
            while s2[left] != ch:
                seen.pop(s2[left], None)
                left += 1
                count -= 1
            left += 1
        else:
            count += 1
            seen[ch] = seen.get(ch, 0) + 1
            if count == len(s1):
                return True
    return count == len(s1)


def length_of_last_word(s: str) -> int:
    """Return the length of the last word; a blank string gives its own length."""
    words = s.split()
    return len(words[-1]) if words else len(s)


def min_window(s: str, t: str) -> str:
    """Return the shortest slice of ``s`` holding every character of ``t``, or ""."""
    if len(t) > len(s):
        return ""
    needed = Counter(t)
    counts: Counter[str] = Counter()
    answer = ""
    matched = 0
    left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        if counts[ch] <= needed.get(ch, 0):
            matched += 1
        while matched == len(t) and left <= right:
            window = s[left : right + 1]
            if not answer or len(window) < len(answer):
                answer = window
            dropped = s[left]
            if counts[dropped] == needed.get(dropped, 0):
                matched -= 1
            counts[dropped] -= 1
            left += 1
    return answer