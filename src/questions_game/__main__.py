from questions_game.cli.app import app

app(prog_name="questions-game")
