from tinystorage.cli.main import app

app(prog_name="tinystorage")
