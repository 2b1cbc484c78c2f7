from __future__ import annotations

"""Entry point when running from a checkout: `python main.py decompose 한글`.

The CLI itself lives in `hangeul/cli.py`.
"""

from hangeul.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
