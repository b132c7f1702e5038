import typer
from seq_tools import extract

app = typer.Typer(help="Find four-letter sequences that belong to exactly one word in a dictionary.")

app.add_typer(extract.app, name="seqs", help="Extract and look up unique sequences")

if __name__ == "__main__":
    app()
