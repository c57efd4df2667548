from wxupdate.cli import app

app(prog_name="wxupdate")
