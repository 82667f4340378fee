import importlib

importlib.import_module("demo.events")

from unitharness.cli_obj import cli

if __name__ == "__main__":
    cli()
