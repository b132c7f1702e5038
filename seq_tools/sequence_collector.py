import re
from abc import ABC
from enum import Enum

SEQUENCE_LENGTH = 4
SEQUENCE_PATTERN = re.compile(r"^[a-z]{4}$")


class Status(Enum):
    FIRST_SEEN = "first-seen"
    NON_UNIQUE = "non-unique"


class SequenceBase(ABC):
    def generate_windows(self, text, k=SEQUENCE_LENGTH):
        for i in range(len(text) - k + 1):
            yield text[i:i + k]

    def is_valid_sequence(self, sequence):
        return SEQUENCE_PATTERN.match(sequence) is not None


class SequenceCollector(SequenceBase):
    def __init__(self):
        self.sequences = {}
        self.words_seen = 0
        self.candidates = 0
        self.rejected = 0

    def observe(self, word):
        self.words_seen += 1
        word_lower = word.lower()
        if len(word_lower) < SEQUENCE_LENGTH:
            return
        for sequence in self.generate_windows(word_lower):
            if not self.is_valid_sequence(sequence):
                self.rejected += 1
                continue
            self.candidates += 1
            entry = self.sequences.get(sequence)
            if entry is None:
                self.sequences[sequence] = (Status.FIRST_SEEN, word)
            elif entry[0] is Status.FIRST_SEEN:
                self.sequences[sequence] = (Status.NON_UNIQUE, None)

    def observe_all(self, words):
        for word in words:
            self.observe(word)
        return self

    def finalize(self):
        return [(sequence, word) for sequence, (status, word) in self.sequences.items()
                if status is Status.FIRST_SEEN]

    def lookup(self, sequence):
        entry = self.sequences.get(sequence.lower())
        if entry is None:
            return None, None
        return entry

    def stats(self):
        unique = sum(1 for status, _ in self.sequences.values() if status is Status.FIRST_SEEN)
        return {
            "Words Read": self.words_seen,
            "Candidates": self.candidates,
            "Rejected Windows": self.rejected,
            "Unique Sequences": unique,
            "Non-unique Sequences": len(self.sequences) - unique,
        }
