from announcer.main import run

run()
