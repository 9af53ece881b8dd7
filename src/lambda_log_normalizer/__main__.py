"""Module entrypoint.

Allows:
    python -m lambda_log_normalizer
"""

from __future__ import annotations

from lambda_log_normalizer.server.log_server import main

if __name__ == "__main__":
    main()
