"""Run the warrior API with ``python -m warriorapi``."""

from warriorapi.api.app import run_server

if __name__ == "__main__":
    run_server()
