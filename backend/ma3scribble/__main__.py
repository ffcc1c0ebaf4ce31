from ma3scribble.main import run

run()
