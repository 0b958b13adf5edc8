from .cli import app

app(prog_name="bucket-tester")
