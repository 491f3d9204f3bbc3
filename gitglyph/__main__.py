from gitglyph.cli import app

app()
