"""Global pytest configuration."""

import os

# Keep upstream call logs quiet unless a test asks for them
os.environ.setdefault("LOG_LEVEL", "WARNING")
