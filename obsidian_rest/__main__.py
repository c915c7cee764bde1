from obsidian_rest.server import run_server

run_server()
