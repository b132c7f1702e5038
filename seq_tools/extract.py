import typer
import pandas as pd
from pathlib import Path

from seq_tools.sequence_collector import SequenceCollector, Status, SEQUENCE_LENGTH, SEQUENCE_PATTERN
from seq_tools.word_io import read_words, write_outputs

app = typer.Typer(help="Extract four-letter sequences that occur in exactly one dictionary word.")


def check_dictionary(dictionary):
    file_path = Path(dictionary)
    if not file_path.exists():
        typer.echo(f"Error: File '{dictionary}' not found.")
        raise typer.Exit(code=1)
    return file_path


def collect_sequences(file_path):
    try:
        return SequenceCollector().observe_all(read_words(file_path))
    except OSError as e:
        typer.echo(f"Error reading '{file_path}': {e}")
        raise typer.Exit(code=1)


def summarize_collector(collector):
    stats = collector.stats()
    df_stats = pd.DataFrame({key: [value] for key, value in stats.items()})
    summary_lines = []
    summary_lines.append("--------------------------------------------------")
    summary_lines.append("Sequence Stats:")
    summary_lines.append(df_stats.to_string(index=False))
    summary_lines.append("--------------------------------------------------")
    return "\n".join(summary_lines)


@app.command("extract")
def extract(
    dictionary: str = typer.Argument("dictionary.txt", envvar="SEQ_TOOLS_DICTIONARY", help="Word list, one word per line."),
    sequences: str = typer.Option("sequences.txt", "--sequences", "-s", envvar="SEQ_TOOLS_SEQUENCES", help="Output file for unique sequences."),
    words: str = typer.Option("words.txt", "--words", "-w", envvar="SEQ_TOOLS_WORDS", help="Output file for the matching words."),
    stats: bool = typer.Option(False, "--stats", help="Print a summary table of the run."),
):
    file_path = check_dictionary(dictionary)
    collector = collect_sequences(file_path)
    pairs = collector.finalize()

    try:
        write_outputs(pairs, sequences, words)
    except OSError as e:
        typer.echo(f"Error writing output files: {e}")
        raise typer.Exit(code=1)

    if stats:
        typer.echo(summarize_collector(collector))
    typer.echo(f"Processing complete. Output files generated: {sequences}, {words}")


@app.command("lookup")
def lookup(
    sequence: str = typer.Argument(..., help="Four-letter sequence to check."),
    dictionary: str = typer.Argument("dictionary.txt", envvar="SEQ_TOOLS_DICTIONARY", help="Word list, one word per line."),
):
    if not SEQUENCE_PATTERN.match(sequence.lower()):
        typer.echo(f"Error: '{sequence}' is not a {SEQUENCE_LENGTH}-letter sequence.")
        raise typer.Exit(code=1)

    file_path = check_dictionary(dictionary)
    collector = collect_sequences(file_path)
    status, word = collector.lookup(sequence)

    if status is None:
        typer.echo(f"'{sequence.lower()}' does not occur in {file_path.name}.")
    elif status is Status.NON_UNIQUE:
        typer.echo(f"'{sequence.lower()}' occurs in more than one word.")
    else:
        typer.echo(f"'{sequence.lower()}' is unique to: {word}")


if __name__ == "__main__":
    app()
