from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

from orgchart.cli import main


if __name__ == "__main__":
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    sys.exit(main())
