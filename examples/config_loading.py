"""config_loading.py"""
from pathlib import Path

from flagkit.cli import parse_or_exit
from flagkit.config import loader

flags = loader(Path(__file__).parent / "flags.yaml")

if __name__ == "__main__":
    parse_or_exit(flags)
    print(flags.to_namespace())
