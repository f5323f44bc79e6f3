"""
Green Job Hunter - CLI Entry Point.

Walks through Upload CV -> Review Jobs -> Approve Applications -> Submit
against a running API server (start it with ``python -m backend``).

Usage:
    python main.py [path/to/cv.pdf]
"""

from dotenv import load_dotenv

load_dotenv()

from wizard.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
