"""Allow ``python -m vault``."""

from vault.main import run

if __name__ == "__main__":
    run()
