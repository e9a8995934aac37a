from vertinfo.cli import app

app()
