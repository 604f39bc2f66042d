from __future__ import annotations

from json_shape.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
