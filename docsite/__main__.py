from docsite.cli import app

app(prog_name="docsite")
