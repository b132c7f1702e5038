from pathlib import Path


def chomp(line):
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_words(path):
    # undecodable bytes become lone surrogates, which never pass the [a-z] check
    with open(Path(path), encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        for line in f:
            yield chomp(line)


def write_outputs(pairs, sequences_path, words_path):
    sequences_path = Path(sequences_path)
    words_path = Path(words_path)
    sequences_file = open(sequences_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    try:
        words_file = open(words_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError:
        sequences_file.close()
        sequences_path.unlink()
        raise

    count = 0
    with sequences_file, words_file:
        for sequence, word in pairs:
            sequences_file.write(sequence + "\n")
            words_file.write(word + "\n")
            count += 1
    return count
