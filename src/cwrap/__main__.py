from cwrap.cli.cli import app


app(prog_name="cwrap")
