from input_validator.cli import app

app()
