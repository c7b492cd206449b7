from toadsfrogs.main import app

app(prog_name="toadsfrogs")
