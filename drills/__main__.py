from drills.main import run

run()
