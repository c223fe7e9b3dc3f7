#!/usr/bin/env python3
"""Split a secret into hex shares or combine shares back into the secret."""

from threshold_secrets.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
