# inkwell/__main__.py
# Allow `python -m inkwell`

from .cli.app import app

if __name__ == "__main__":
    app()
