from authdb.main import run

run()
